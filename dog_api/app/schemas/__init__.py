"""
Pydantic schema definitions for API payloads.

Each resource (dogs, breeds, adoption, health, training) defines its
own models for request and response bodies.  Attribute names are
snake_case in Python and camelCase on the wire.
"""
