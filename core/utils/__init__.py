"""Text utilities shared by the domain schemas and services."""
