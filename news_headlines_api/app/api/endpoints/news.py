"""
News headline endpoints.

CRUD routes over the in‑memory headline store.  Errors raised by the
store (``HeadlineNotFoundError``, ``InvalidHeadlineError``) are turned
into ``{"error": ...}`` responses by the handler registered in
``main.create_app``.

Responses exclude unset fields so that a headline stored without an
``imageUrl`` is returned without the key.  ``/random`` is declared
before ``/{headline_id}`` so it is not captured as an id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from news_headlines_api.app.api.deps import get_headline_service
from news_headlines_api.app.schemas.headline import Headline, HeadlineCreate, HeadlineUpdate
from news_headlines_api.app.services.headline_service import HeadlineService

router = APIRouter()


@router.get("", response_model=List[Headline], response_model_exclude_unset=True)
def list_headlines(service: HeadlineService = Depends(get_headline_service)) -> List[Headline]:
    """Return every headline in insertion order."""
    return service.list_headlines()


@router.get("/random", response_model=Headline, response_model_exclude_unset=True)
def get_random_headline(service: HeadlineService = Depends(get_headline_service)) -> Headline:
    """Return one headline chosen at random, or 404 if the store is empty."""
    return service.get_random_headline()


@router.get("/{headline_id}", response_model=Headline, response_model_exclude_unset=True)
def get_headline(headline_id: str, service: HeadlineService = Depends(get_headline_service)) -> Headline:
    """Return the headline with this exact id, or 404."""
    return service.get_headline(headline_id)


@router.post(
    "",
    response_model=Headline,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_headline(
    headline_in: Optional[HeadlineCreate] = None,
    service: HeadlineService = Depends(get_headline_service),
) -> Headline:
    """Create a headline.  ``title`` is required; ``url`` defaults to ``#``."""
    return service.create_headline(headline_in or HeadlineCreate())


@router.put("/{headline_id}", response_model=Headline, response_model_exclude_unset=True)
def update_headline(
    headline_id: str,
    headline_in: Optional[HeadlineUpdate] = None,
    service: HeadlineService = Depends(get_headline_service),
) -> Headline:
    """Update a headline.

    Empty ``title``/``url`` values keep the current ones; an explicit
    ``imageUrl`` (including ``null``) always replaces the image.
    """
    return service.update_headline(headline_id, headline_in or HeadlineUpdate())


@router.delete("/{headline_id}", response_model=Headline, response_model_exclude_unset=True)
def delete_headline(headline_id: str, service: HeadlineService = Depends(get_headline_service)) -> Headline:
    """Delete a headline and return it."""
    return service.delete_headline(headline_id)
