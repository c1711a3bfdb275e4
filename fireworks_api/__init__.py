from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
from contextlib import asynccontextmanager

from grass_fireworks import __version__
from grass_fireworks.svg.registry import get_themes

from .routes import router, error_response
from .config import global_config, server_config
from .middleware import cache_from_config, security_headers_middleware
from .models import HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, str(server_config.get("server.log_level", "INFO")).upper()),
    format='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("[api] Starting Grass Fireworks")
    logger.info(f"[api] Themes: {[t.value for t in get_themes()]}")
    logger.info(
        f"[api] Canvas {global_config.canvas.min_width}-{global_config.canvas.max_width} x "
        f"{global_config.canvas.min_height}-{global_config.canvas.max_height}, "
        f"cache {'enabled' if app.state.response_cache.enabled else 'disabled'}"
    )

    yield

    # Shutdown
    logger.info("[api] Shutting down Grass Fireworks")
    app.state.response_cache.clear()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Invalid query parameters -> 400 with a flat error list"""
    details = [
        {"loc": [str(p) for p in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.debug(f"[api] Invalid parameters for {request.url.path}: {details}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid parameters", details)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Grass Fireworks",
        description="Animated SVG fireworks from a GitHub user's daily contributions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.response_cache = cache_from_config()

    # Add CORS middleware (configurable via server.yaml)
    if server_config.get("security.cors.enabled", False):
        app.add_middleware(
            CORSMiddleware,
            allow_origins=server_config.get("security.cors.allow_origins", []),
            allow_methods=server_config.get("security.cors.allow_methods", ["GET"]),
            max_age=server_config.get("security.cors.max_age", 86400),
        )
        logger.info("[api] CORS enabled with configuration")

    app.middleware("http")(security_headers_middleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router)

    @app.get("/", response_model=HealthResponse, response_model_exclude_none=True)
    def root():
        """Service identification"""
        return HealthResponse(status="ok")

    @app.get("/healthz", response_model=HealthResponse, response_model_exclude_none=True)
    def health_check():
        """Health check endpoint"""
        return HealthResponse(status="healthy", version=__version__, timestamp=time.time())

    return app


app = create_app()
