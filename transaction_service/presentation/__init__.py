"""Presentation layer: HTTP routes, schemas and middleware."""
