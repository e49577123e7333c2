"""Path algorithms over the one-digit edit graph."""
