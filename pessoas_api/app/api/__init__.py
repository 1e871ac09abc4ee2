"""
HTTP layer.

``router.py`` aggregates the routers defined in ``endpoints`` and
``dependencies.py`` provides the objects injected into them.
"""
