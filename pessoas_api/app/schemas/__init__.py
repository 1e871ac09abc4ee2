"""
Pydantic schema definitions for API payloads.

The wire payload and the stored record are separate models so that the
representation kept in memory does not depend on how clients send it.
"""
