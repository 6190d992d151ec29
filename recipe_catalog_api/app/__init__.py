"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, errors, locking),
``schemas`` (pydantic payloads), ``services`` (the in‑memory store
and statistics) and ``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
