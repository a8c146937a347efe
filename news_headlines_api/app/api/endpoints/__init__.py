"""
Endpoint subpackage.

Each module defines the handlers for one part of the API.  They are
aggregated in ``api/router.py``.
"""
