"""Market snapshot backend."""
