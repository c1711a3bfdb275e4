import logging
import logging.handlers
import os
import sys
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ---------------- Logging ----------------


def get_logger(name="grass_fireworks", log_file=None):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    fmt = logging.Formatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
    )
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    if log_file:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


log = get_logger("grass_fireworks")

# ---------------- Config Models ----------------


class CanvasCfg(BaseModel):
    default_width: int = 400
    default_height: int = 200
    min_width: int = 200
    max_width: int = 800
    min_height: int = 100
    max_height: int = 400

    @model_validator(mode="after")
    def check_bounds(self):
        if not self.min_width <= self.default_width <= self.max_width:
            raise ValueError("canvas.default_width must lie within [min_width, max_width]")
        if not self.min_height <= self.default_height <= self.max_height:
            raise ValueError("canvas.default_height must lie within [min_height, max_height]")
        return self


class GitHubCfg(BaseModel):
    endpoint: str = "https://api.github.com/graphql"
    timeout_seconds: float = Field(default=10.0, gt=0)
    retries: int = Field(default=0, ge=0)
    token_env: str = "GITHUB_TOKEN"
    user_agent: str = "grass-fireworks"


class CascadeCfg(BaseModel):
    commit_threshold: int = Field(default=50, ge=1)
    lucky_day: bool = True  # every 10th day of the year also triggers the cascade
    label: str = "加茂川"


class DemoCfg(BaseModel):
    default_commits: int = Field(default=8, ge=0)
    display_name: str = "demo"


class GlobalCfg(BaseModel):
    canvas: CanvasCfg = Field(default_factory=CanvasCfg)
    github: GitHubCfg = Field(default_factory=GitHubCfg)
    cascade: CascadeCfg = Field(default_factory=CascadeCfg)
    demo: DemoCfg = Field(default_factory=DemoCfg)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(path: Optional[str] = None) -> GlobalCfg:
    if path is None:
        path = os.path.join(BASE, "conf", "global.yaml")
        if not os.path.exists(path):
            path = os.path.join(BASE, "conf", "global.example.yaml")
    if not os.path.exists(path):
        log.warning(f"Config file not found at {path}, using defaults")
        return GlobalCfg()
    raw = load_yaml(path)

    try:
        cfg = GlobalCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


# ---------------- Env ----------------


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    env = {k: v for k, v in os.environ.items()}
    return env


def github_token(cfg: GlobalCfg, env: Optional[dict] = None) -> Optional[str]:
    """Return the GitHub token named by ``github.token_env``, or None when unset."""
    env = env if env is not None else load_env()
    token = env.get(cfg.github.token_env, "").strip()
    return token or None
