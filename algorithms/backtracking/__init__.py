"""Backtracking searches: N-Queens and Sudoku."""
