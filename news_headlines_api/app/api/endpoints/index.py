"""
API index endpoint.

Returns a welcome message and a short description of every news
endpoint so that a client can discover the API without reading the
OpenAPI document.
"""

from typing import Any, Dict, List

ENDPOINTS: List[Dict[str, str]] = [
    {"method": "GET", "path": "/api/news", "description": "Get all headlines"},
    {"method": "GET", "path": "/api/news/random", "description": "Get a random headline"},
    {"method": "GET", "path": "/api/news/:id", "description": "Get a specific headline by ID"},
    {"method": "POST", "path": "/api/news", "description": "Create a new headline"},
    {"method": "PUT", "path": "/api/news/:id", "description": "Update a headline"},
    {"method": "DELETE", "path": "/api/news/:id", "description": "Delete a headline"},
]


async def get_index() -> Dict[str, Any]:
    """Describe the available endpoints."""
    return {"message": "Welcome to the News Headlines API", "endpoints": ENDPOINTS}
