import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    show_banner: bool = True
    show_chart: bool = True


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def load_settings() -> Settings:
    """Read ZERODETECT_* settings from the environment (and a .env file, if present)."""
    load_dotenv()
    return Settings(
        log_level=os.environ.get("ZERODETECT_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        show_banner=_env_flag("ZERODETECT_BANNER", True),
        show_chart=_env_flag("ZERODETECT_CHART", True),
    )
