"""Storefront FastAPI application.

Serves the storefront state to a single visitor session over HTTP.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so the app and its stores share it.
from storefront.api import create_app  # noqa: E402
from storefront.domain import storefront  # noqa: E402

storefront.init()

app = create_app()
