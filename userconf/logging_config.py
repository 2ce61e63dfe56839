from __future__ import annotations

"""Logging bootstrap for applications built on userconf.

Call :func:`setup_logging` once at application start-up. The library itself
never configures logging on import.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from .exceptions import ConfigError, FailedToFindConfigFile
from .loader import load

__all__ = ["setup_logging"]

LOGGING_CONFIG_NAME = "logging"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(namespace: Optional[str] = None) -> bool:
    """Configure logging, preferring ``<namespace>/logging.{toml,json,yml}``.

    The file must hold a :func:`logging.config.dictConfig` mapping with a
    ``version`` key. Anything else (no namespace, no file, unreadable file,
    rejected dictConfig) installs a minimal console configuration instead.

    Returns ``True`` when the namespace logging config was applied.
    """
    applied = False
    logging_config = _load_logging_config(namespace) if namespace else None

    if isinstance(logging_config, dict) and logging_config.get("version"):
        try:
            logging.config.dictConfig(logging_config)
            logging.getLogger(__name__).info("Logging initialised from %s config", namespace)
            applied = True
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.getLogger(__name__).error("Invalid logging config for %s: %s", namespace, exc)
    else:
        _setup_minimal_logging()

    _apply_debug_overrides()
    return applied


def _load_logging_config(namespace: str) -> Optional[Dict[str, Any]]:
    try:
        return load(namespace, LOGGING_CONFIG_NAME)
    except FailedToFindConfigFile:
        return None
    except ConfigError as exc:
        # Logging is not configured yet
        print(f"Error loading logging config: {exc}")
        return None


def _setup_minimal_logging() -> None:
    """Console logging at INFO, with a named entry for the package loggers.

    The ``userconf`` entry is what ``USERCONF_DEBUG_MODULES=userconf`` flips
    to DEBUG without touching the root level.
    """
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'console': {'format': LOG_FORMAT}},
        'handlers': {
            'console': {'class': 'logging.StreamHandler', 'formatter': 'console', 'level': 'INFO'},
        },
        'root': {'level': 'INFO', 'handlers': ['console']},
        'loggers': {
            'userconf': {'level': 'INFO'},
        },
    })


def _apply_debug_overrides() -> None:
    """Switch loggers listed in ``USERCONF_DEBUG_MODULES`` to DEBUG.

    ``USERCONF_DEBUG_MODULES=userconf.loader,myapp.settings``
    """
    extra_modules = os.environ.get('USERCONF_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(
            h.level == logging.NOTSET or h.level <= logging.DEBUG for h in logger.handlers
        )
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
