"""Corporation data-access layer for game API aggregation."""
