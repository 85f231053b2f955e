"""Application settings.

Plain module-level constants; each one can be overridden from the
environment with the TASKLIST_ prefix (e.g. TASKLIST_TOPMOST=1).
"""
from __future__ import annotations
import os

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ===================== UI =====================
WINDOW_TITLE = _env(_k("WINDOW_TITLE"), "Task List")
WINDOW_GEOMETRY = _env(_k("WINDOW_GEOMETRY"), "760x560")
TOPMOST = _env_bool(_k("TOPMOST"), False)
ROW_WRAP = _env_int(_k("ROW_WRAP"), 240)  # minimum wraplength of task text, px

# ===================== logging =====================
LOG_LEVEL = _env(_k("LOG_LEVEL"), "INFO").upper()
LOG_FILE = _env(_k("LOG_FILE"), "")  # empty -> console only
