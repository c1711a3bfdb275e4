import logging
from datetime import date
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from grass_fireworks.services.github import GitHubApiError, GitHubService, UserNotFoundError
from grass_fireworks.services.levels import calculate_level, should_trigger_cascade
from grass_fireworks.services.themes import Theme, get_themed_level_name, resolve_theme
from grass_fireworks.svg.generator import FireworksSVGConfig, generate_fireworks_svg
from grass_fireworks.utils.dates import Clock, SystemClock

from .config import global_config, server_config
from .middleware import ResponseCache
from .models import DemoQuery, ErrorResponse, FireworksQuery

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"
CACHE_TTL_FIREWORKS = server_config.get("cache.ttl_fireworks", 3600)
CACHE_TTL_DEMO = server_config.get("cache.ttl_demo", 31536000)


# ---------------- Dependencies ----------------


def get_clock() -> Clock:
    return SystemClock()


@lru_cache(maxsize=1)
def get_github_service() -> GitHubService:
    return GitHubService.from_config(global_config)


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.response_cache


# ---------------- Helpers ----------------


def error_response(status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def svg_response(svg: str, cache_control: str, cache_status: str) -> Response:
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": cache_control, "X-Cache": cache_status},
    )


def cache_key(request: Request, theme: Theme, day: Optional[date] = None) -> str:
    # auto theme changes daily, so the resolved theme is part of the key
    key = f"{request.url}#{theme.value}"
    if day is not None:
        # lucky-day cascade depends on the date
        key += f"@{day.isoformat()}"
    return key


def render(
    username: str,
    commits: int,
    level: int,
    theme: Theme,
    width: int,
    height: int,
    extra: bool = False,
) -> str:
    config = FireworksSVGConfig(
        username=username,
        commits=commits,
        level=level,
        subtitle=get_themed_level_name(level, theme),
        width=width,
        height=height,
        theme=theme,
        extra=extra,
        extra_label=global_config.cascade.label,
    )
    return generate_fireworks_svg(config)


# ---------------- Endpoints ----------------


@router.get("/api/fireworks", responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def get_fireworks(
    request: Request,
    query: Annotated[FireworksQuery, Query()],
    clock: Clock = Depends(get_clock),
    github: GitHubService = Depends(get_github_service),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Fireworks for the user's contributions today"""
    user = (query.user or "").strip()
    if not user:
        return error_response(status.HTTP_400_BAD_REQUEST, "user parameter is required")

    today = clock.today()
    theme = resolve_theme(query.theme, clock)
    cache_control = f"public, max-age={CACHE_TTL_FIREWORKS}"
    key = cache_key(request, theme, today)
    cached = cache.get(key)
    if cached is not None:
        return svg_response(cached, cache_control, "HIT")

    try:
        commits = github.fetch_today_contribution_count(user)
    except UserNotFoundError:
        logger.info(f"[api] GitHub user not found: {user}")
        return error_response(status.HTTP_404_NOT_FOUND, "User not found")
    except GitHubApiError as e:
        # Degrade to the silent night; not cached so the next request retries upstream
        logger.warning(f"[api] GitHub API error for {user}: {e.message}")
        svg = render(user, 0, 0, theme, query.width, query.height)
        return svg_response(svg, cache_control, "BYPASS")

    level = calculate_level(commits)
    extra = should_trigger_cascade(
        commits,
        today,
        threshold=global_config.cascade.commit_threshold,
        lucky_day=global_config.cascade.lucky_day,
    )
    logger.info(
        f"[api] {user}: commits={commits} level={level} theme={theme.value} cascade={extra}"
    )
    svg = render(user, commits, level, theme, query.width, query.height, extra=extra)
    cache.set(key, svg, CACHE_TTL_FIREWORKS)
    return svg_response(svg, cache_control, "MISS")


@router.get("/api/demo", responses={400: {"model": ErrorResponse}})
def get_demo(
    request: Request,
    query: Annotated[DemoQuery, Query()],
    clock: Clock = Depends(get_clock),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Fireworks for a given commit count or level; never calls GitHub"""
    theme = resolve_theme(query.theme, clock)
    cache_control = f"public, max-age={CACHE_TTL_DEMO}, immutable"
    key = cache_key(request, theme)
    cached = cache.get(key)
    if cached is not None:
        return svg_response(cached, cache_control, "HIT")

    display_name = query.user or global_config.demo.display_name
    level = query.level if query.level is not None else calculate_level(query.commits)
    svg = render(
        display_name, query.commits, level, theme, query.width, query.height, extra=query.extra
    )
    cache.set(key, svg, CACHE_TTL_DEMO)
    return svg_response(svg, cache_control, "MISS")
