"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (catalogue, users, bookings, statistics).  The routers are
aggregated in ``api/router.py``.
"""
