"""Dynamic-programming table fillers."""
