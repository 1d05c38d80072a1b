from __future__ import annotations
from pydantic import BaseModel, Field, ValidationError
from config.paths import Paths, get_paths
import os
import typer

TICK_ENV = "SPLITWATCH_TICK_MS"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"expected an integer, got {raw!r}", param_hint=name) from exc


class AppConfig(BaseModel):
    paths: Paths = Field(default_factory=get_paths)
    tick_interval_ms: int = Field(default=30, ge=5)
    max_splits: int = Field(default=100, ge=1)
    journal: bool = Field(default_factory=lambda: os.getenv("SPLITWATCH_JOURNAL", "1") != "0")

    model_config = {"arbitrary_types_allowed": True}

    @property
    def tick_interval(self) -> float:
        return self.tick_interval_ms / 1000.0


def load_config() -> AppConfig:
    """Build a fresh config from the current environment.

    Bad environment values surface as ``typer.BadParameter`` so the CLI
    reports them as usage errors.
    """
    tick_ms = _env_int(TICK_ENV, 30)
    try:
        return AppConfig(paths=get_paths(force_refresh=True), tick_interval_ms=tick_ms)
    except ValidationError as exc:
        raise typer.BadParameter(f"must be at least 5, got {tick_ms}", param_hint=TICK_ENV) from exc
