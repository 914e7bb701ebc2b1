"""Grid pathfinders.  All take (grid, start, finish) and never mutate the grid passed in."""
