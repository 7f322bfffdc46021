"""Application layer: use cases and their data transfer objects."""
