"""
Top‑level package for the Rent-a-Spot API.

This file makes ``rent_a_spot_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``rent_a_spot_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
