"""Small helpers shared across services."""
