from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from grass_fireworks.svg.sdk import MAX_LEVEL

from .config import global_config

CANVAS = global_config.canvas


class FireworksQuery(BaseModel):
    """Query parameters for /api/fireworks"""
    user: Optional[str] = Field(None, description="GitHub login")
    width: int = Field(CANVAS.default_width, ge=CANVAS.min_width, le=CANVAS.max_width)
    height: int = Field(CANVAS.default_height, ge=CANVAS.min_height, le=CANVAS.max_height)
    theme: Optional[str] = Field(None, description="kata, matsuri or auto")


class DemoQuery(BaseModel):
    """Query parameters for /api/demo"""
    commits: int = Field(global_config.demo.default_commits, ge=0)
    level: Optional[int] = Field(None, ge=0, le=MAX_LEVEL, description="Overrides the level derived from commits")
    user: Optional[str] = Field(None, description="Display name")
    width: int = Field(CANVAS.default_width, ge=CANVAS.min_width, le=CANVAS.max_width)
    height: int = Field(CANVAS.default_height, ge=CANVAS.min_height, le=CANVAS.max_height)
    theme: Optional[str] = None
    extra: bool = Field(False, description="Show the waterfall cascade")


class ErrorResponse(BaseModel):
    """Error body for 4xx responses"""
    error: str
    details: Optional[List[Dict[str, Any]]] = None


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str = "grass-fireworks"
    version: Optional[str] = None
    timestamp: Optional[float] = None
