"""
Data-structure mutators.  Each user action returns (new_values, steps):
a short fixed script rather than an algorithmic trace.
"""
