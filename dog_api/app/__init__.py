"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds
configuration, logging, the in‑memory record stores and the shared
query helpers; ``schemas`` holds the Pydantic payload models;
``services`` holds the per‑resource business logic; and ``api``
exposes the routers.  Each resource (dogs, breeds, adoption, health,
training) has its own module in every layer.
"""

from .main import app  # noqa: F401
