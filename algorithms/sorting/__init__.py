"""Array sorts: comparison sorts and distribution sorts."""
