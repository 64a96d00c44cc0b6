"""Main module for the token dashboard service."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from token_dashboard.config import Settings
from token_dashboard.providers import MockTokenProvider, TokenProviderABC
from token_dashboard.routers import graphql_router
from token_dashboard.services import create_account_service

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    catalog: TokenProviderABC | None = None,
) -> FastAPI:
    """Build the FastAPI app. Collaborators are created in the lifespan, once per app."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Create the token catalog and account service at startup."""
        if settings.uses_default_secret:
            logger.warning("JWT_SECRET is not set; signing sessions with the default key")

        token_catalog = catalog or MockTokenProvider()
        fastapi_app.state.settings = settings
        fastapi_app.state.token_catalog = token_catalog
        fastapi_app.state.account_service = create_account_service(settings, token_catalog)
        logger.info("Token catalog loaded with %d tokens", len(token_catalog.list_tokens()))

        yield

        # Accounts live only as long as the process.
        logger.info("Shutting down; in-memory accounts are discarded")

    fastapi_app = FastAPI(
        title="Token Dashboard",
        description="Mock crypto token catalog and in-memory portfolios over GraphQL",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.include_router(graphql_router, prefix="/graphql")

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def configure_logging(level: str) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run():
    """Run the server (uvicorn). Use for the `start` script."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Server ready at http://%s:%s/graphql", settings.host, settings.port)
    uvicorn.run("token_dashboard.main:app", host=settings.host, port=settings.port)


def run_dev():
    """Run the development server with auto-reload on all interfaces."""
    settings = Settings.from_env()
    configure_logging("DEBUG")
    uvicorn.run("token_dashboard.main:app", host="0.0.0.0", port=settings.port, reload=True)
