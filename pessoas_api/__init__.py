"""
Top‑level package for the Pessoas API.

All functionality lives in submodules under ``app``; the package
itself exports nothing so that importing ``pessoas_api`` stays cheap.
"""

__all__ = []
