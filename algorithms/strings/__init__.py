"""Exact string matching.  Steps index (text_index, pattern_index)."""
