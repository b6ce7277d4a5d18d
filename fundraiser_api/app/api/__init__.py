"""
HTTP routing layer.

``router.py`` aggregates the public and admin routers under ``/api``.
Handlers are thin: read the state, call a service, persist, respond.
"""
