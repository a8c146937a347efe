"""
Top‑level package for the News Headlines API.

All functionality lives in submodules under ``app``; import the
application as ``news_headlines_api.app.main:app``.
"""

__all__ = []
