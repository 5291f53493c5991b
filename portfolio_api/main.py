# === portfolio_api/main.py ===
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from contextlib import asynccontextmanager
from portfolio_api.api.api import api_router
from portfolio_api.core.config import Settings, settings
from portfolio_api.core.errors import register_exception_handlers, unhandled_exception_handler
from portfolio_api.db.database import Database
from portfolio_api.db.seed import ensure_seeded
import time
import logging

#logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


def create_app(config: Settings = settings) -> FastAPI:
    db = Database(config.database_url, echo=config.DATABASE_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up...")
        await db.create_db_and_tables()
        if config.SEED_ON_STARTUP:
            async with db.async_session() as session:
                await ensure_seeded(session)
        yield
        logger.info("Shutting down...")
        await db.dispose()

    docs_enabled = config.ENABLE_DOCS
    app = FastAPI(
        lifespan=lifespan,
        title="Portfolio API",
        description="Projects, skills and contact form for the portfolio site",
        version="1.0.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        # "/projects/" is a routing miss, not a redirect to "/projects"
        redirect_slashes=False,
    )
    app.state.db = db
    app.state.settings = config

    #middleware security
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=config.ALLOWED_HOSTS)

    #CORS middleware, the web UI is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        max_age=86400,  # 24 hours
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            # answered here so the error is logged once and still timed
            response = await unhandled_exception_handler(request, exc)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > config.SLOW_REQUEST_SECONDS:
            logger.warning(f"Slow request: {request.method} {request.url} took {process_time:.2f}s")

        return response

    register_exception_handlers(app)

    #API router
    app.include_router(api_router, prefix=config.API_PREFIX)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "portfolio_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
