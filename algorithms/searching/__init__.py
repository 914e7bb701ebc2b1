"""Array searches.  The target is drawn from the array itself."""
