"""
Application package initializer.

The service is split the usual way: configuration, logging, errors and
the in‑memory store live in ``core``, request models in ``schemas``,
business rules in ``services`` and the HTTP routes in ``api``.
"""

from .main import app, create_app  # noqa: F401
