"""Read operations, grouped by the aggregate they read."""
