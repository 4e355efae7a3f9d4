"""Deterministic content for integer-sequence input fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from jobfixtures.errors import InvalidArgumentError

LOGGER = logging.getLogger(__name__)


def validate_limit(limit: int) -> int:
    """Reject limits that are not non-negative integers."""

    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidArgumentError(f"limit must be an integer, got {type(limit).__name__}")
    if limit < 0:
        raise InvalidArgumentError("limit must be >= 0")
    return limit


def iter_input_lines(limit: int) -> Iterator[str]:
    """Yield ``"0\\n"`` through ``"{limit-1}\\n"`` in ascending order."""

    for value in range(validate_limit(limit)):
        yield f"{value}\n"


def verify_input_file(path: Path, limit: int, logger: logging.Logger | None = None) -> bool:
    """Return True when the file holds exactly the sequence for ``limit``."""

    validate_limit(limit)
    effective_logger = logger or LOGGER
    expected = iter_input_lines(limit)
    with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        for line_no, line in enumerate(handle):
            wanted = next(expected, None)
            if line != wanted:
                effective_logger.info(
                    "content.verify_mismatch path=%s line_no=%s expected=%r actual=%r",
                    path,
                    line_no,
                    wanted,
                    line,
                )
                return False
    leftover = next(expected, None)
    if leftover is not None:
        effective_logger.info("content.verify_truncated path=%s missing_from=%r", path, leftover)
        return False
    return True
