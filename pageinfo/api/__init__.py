"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from pageinfo.api import app

    uvicorn pageinfo.api:app --reload
"""

from pageinfo.api.app import app

__all__ = ["app"]
