"""Maze generators.  They only ever emit `wall` steps and never wall start or finish."""
