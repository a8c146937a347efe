"""
Application package initializer.

The service is organised in layers: ``api`` holds the routers and
endpoint modules, ``schemas`` the pydantic request and response
models, ``services`` the in‑memory headline store and ``core`` the
configuration and logging setup.
"""

from .main import app  # noqa: F401
