"""Runtime settings read from the environment (a local .env file is honoured)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from exoexplorer.i18n import LANGUAGES

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] %(message)s"

_API_KEY_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


class ConfigError(Exception):
    """Invalid or missing configuration."""


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one app process."""

    api_key: str | None
    text_model: str = "gemini-3-flash-preview"
    image_model: str = "gemini-2.5-flash-image"
    request_timeout: float = 60.0  # Seconds per generative call
    default_lang: str = "zh"
    log_level: str = "INFO"


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `env` (defaults to os.environ after loading .env).

    Raises:
        ConfigError: On a malformed timeout, language, or log level.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = next((env[name] for name in _API_KEY_VARS if env.get(name)), None)

    raw_timeout = env.get("EXO_REQUEST_TIMEOUT", "60")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"EXO_REQUEST_TIMEOUT is not a number: {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigError(f"EXO_REQUEST_TIMEOUT must be positive: {raw_timeout!r}")

    lang = env.get("EXO_DEFAULT_LANG", "zh")
    if lang not in LANGUAGES:
        raise ConfigError(f"EXO_DEFAULT_LANG must be one of {LANGUAGES}: {lang!r}")

    log_level = env.get("EXO_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown EXO_LOG_LEVEL: {log_level!r}")

    return Settings(
        api_key=api_key,
        text_model=env.get("EXO_TEXT_MODEL", "gemini-3-flash-preview"),
        image_model=env.get("EXO_IMAGE_MODEL", "gemini-2.5-flash-image"),
        request_timeout=timeout,
        default_lang=lang,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger. Safe to call on every rerun."""
    logger = logging.getLogger("exoexplorer")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
