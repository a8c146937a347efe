"""
API package.

``router.py`` exposes a top‑level ``router`` which includes all of the
endpoint modules and is mounted at ``/api`` by the application.
"""
