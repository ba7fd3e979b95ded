"""
Application package initializer.

The service is organised the same way as larger FastAPI projects:
configuration and logging live in ``core``, request/response models in
``schemas``, business logic in ``services`` and HTTP routes under
``api/<version>/``.  There is a single domain (users) backed by an
in‑memory store.
"""

from .main import app, create_app  # noqa: F401
