from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ("png", "svg")


@dataclass
class Settings:
    font_path: str | None
    output_format: str
    dpi: float
    log_dir: str


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support PIXELCHART_* keys if not in the environment.

    We intentionally do not overwrite existing os.environ values.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        k, v = line.split("=", 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        env[k] = v
    return env


def _get_env(
    name: str,
    fallback_names: list[str] | None = None,
    env_file: dict[str, str] | None = None,
) -> str | None:
    # Priority: process env -> .env -> fallback names
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    if fallback_names:
        for fb in fallback_names:
            v = os.getenv(fb)
            if v:
                return v
            if env_file and fb in env_file:
                return env_file[fb]
    return None


def _parse_dpi(raw: str | None, default: float = 72.0) -> float:
    if not raw:
        return default
    try:
        dpi = float(raw)
    except ValueError:
        return default
    return dpi if dpi > 0 else default


def get_settings() -> Settings:
    env_file = _read_env_file()
    font_path = _get_env("PIXELCHART_FONT_PATH", ["CHART_FONT_PATH"], env_file)
    output_format = (_get_env("PIXELCHART_OUTPUT_FORMAT", None, env_file) or "png").lower()
    if output_format not in OUTPUT_FORMATS:
        output_format = "png"
    dpi = _parse_dpi(_get_env("PIXELCHART_DPI", None, env_file))
    log_dir = _get_env("PIXELCHART_LOG_DIR", None, env_file) or "logs"
    return Settings(
        font_path=font_path,
        output_format=output_format,
        dpi=dpi,
        log_dir=log_dir,
    )
