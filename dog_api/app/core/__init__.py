"""Core infrastructure: settings, logging, errors, stores and query helpers."""
