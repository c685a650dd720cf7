from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (brokerage brand styling)
# - Centralized here so components and charts stay in sync.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F5F7FA",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    # Accents (Red + Navy)
    "accent_primary": "#D31145",
    "accent_secondary": "#E8406D",  # hover
    "navy_900": "#003057",
    "navy_800": "#0B3F6B",
    "sky_500": "#009CDE",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class AppConfig:
    # Required unless demo mode is on (Supabase)
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    sales_table: str

    # Explicit opt-in: use the in-memory table instead of Supabase.
    demo_mode: bool
    demo_seed_rows: int

    # AI panel (disabled when the key is unset)
    gemini_api_key: Optional[str]
    gemini_model: str
    insights_timeout: float

    log_level: str

    @property
    def has_backend_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    def validate(self) -> None:
        """Raise ConfigError if the app cannot start with these settings."""
        if self.demo_mode:
            return
        missing = [
            name
            for name, value in (("SUPABASE_URL", self.supabase_url), ("SUPABASE_ANON_KEY", self.supabase_key))
            if not value
        ]
        if missing:
            raise ConfigError(
                f"Missing {', '.join(missing)}. "
                "Set the Supabase credentials, or set DEMO_MODE=true to run against an in-memory table."
            )


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getenv_int(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _getenv_float(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Works with platform env var injection
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL"),
        supabase_key=_getenv("SUPABASE_ANON_KEY") or _getenv("SUPABASE_KEY"),
        sales_table=_getenv("SALES_TABLE", "sales") or "sales",
        demo_mode=(_getenv("DEMO_MODE", "false") or "false").lower() in ("1", "true", "yes"),
        demo_seed_rows=max(0, _getenv_int("DEMO_SEED_ROWS", 0)),
        gemini_api_key=_getenv("GEMINI_API_KEY") or _getenv("API_KEY"),
        gemini_model=_getenv("GEMINI_MODEL", "gemini-3-flash-preview") or "gemini-3-flash-preview",
        insights_timeout=_getenv_float("INSIGHTS_TIMEOUT_SECONDS", 60.0),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    # basicConfig is a no-op once the root logger has handlers (Streamlit reruns).
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
