"""
Endpoint subpackage.

Each module defines an APIRouter for one resource.  They are aggregated
in ``api/router.py``.
"""
