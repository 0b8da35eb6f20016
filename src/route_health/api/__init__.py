"""HTTP layer for the route health application."""
