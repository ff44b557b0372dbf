"""FastAPI application factory for the Storefront render boundary."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.routes import storefront_router
from storefront.application import Storefront
from storefront.domain import storefront
from storefront.notifier.memory import InMemoryNotifier


def create_app(shop: Storefront | None = None) -> FastAPI:
    """Build an app serving a single visitor session.

    The domain must already be initialized. Toasts are queued in memory and
    returned with the next response.
    """
    app = FastAPI(
        title="Storefront API",
        description="Handmade goods storefront — catalogue, cart and custom orders",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for each request."""
        with storefront.domain_context():
            response = await call_next(request)
        return response

    if shop is None:
        with storefront.domain_context():
            shop = Storefront(notifier=InMemoryNotifier())
    app.state.storefront = shop

    app.include_router(storefront_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
