"""Domain layer - values, locations and query results."""
