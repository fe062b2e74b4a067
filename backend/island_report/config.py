"""Runtime configuration loaded from environment variables.

This module centralizes report rendering settings such as JSON indentation,
per-entry tally tracing, and the optional elapsed-time field.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Typed settings object used across the report builder."""

    env: str = os.getenv("ENV", "dev")
    trace_tally: bool = _env_flag("REPORT_TRACE_TALLY")
    report_json_indent: int = int(os.getenv("REPORT_JSON_INDENT", "0"))
    report_include_elapsed_ms: bool = _env_flag("REPORT_INCLUDE_ELAPSED_MS")


settings = Settings()
