"""
Pydantic schema definitions for API payloads.

Admin payloads come from a browser form and are validated leniently:
numeric fields accept anything and are coerced by the services, while
required fields are checked by the handlers so that a missing value
yields HTTP 400 rather than a schema error.
"""
