"""
Application package initializer.

The API is split into a handful of small pieces: ``core`` holds the
infrastructure (configuration, logging, JSON storage, authentication,
rate limiting and error envelopes), ``services`` holds the pure domain
operations over the fundraiser state, ``schemas`` the request payloads
and ``api`` the HTTP routes that glue them together.
"""

from .main import app, create_app  # noqa: F401
