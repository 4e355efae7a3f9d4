"""Path and filesystem helper functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

LOGGER = logging.getLogger(__name__)


def ensure_directories(paths: Iterable[Path]) -> list[Path]:
    """Create all directories in the iterable if they do not exist."""

    created_or_existing: list[Path] = []
    for directory in paths:
        directory.mkdir(parents=True, exist_ok=True)
        created_or_existing.append(directory)
    return created_or_existing


def remove_if_exists(path: Path, logger: logging.Logger | None = None) -> bool:
    """Best-effort delete of ``path``; returns True when a file was removed.

    Failures are logged and otherwise ignored. Callers that then create the
    file exclusively will surface a deletion that did not take effect.
    """

    effective_logger = logger or LOGGER
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        effective_logger.debug("paths.remove_failed path=%s error=%s", path, exc)
        return False
    return True
