"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from news_headlines_api.app.services.headline_service import HeadlineService


def get_headline_service(request: Request) -> HeadlineService:
    """Return the store attached to the running application."""
    return request.app.state.headline_service
