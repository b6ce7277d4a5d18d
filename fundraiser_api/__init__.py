"""
Top‑level package for the Fundraiser Tracker API.

This file makes ``fundraiser_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``fundraiser_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
