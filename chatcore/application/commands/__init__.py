"""Write operations, grouped by the aggregate they change."""
