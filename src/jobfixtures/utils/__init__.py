"""Shared utility helpers."""

from jobfixtures.utils.paths import ensure_directories, remove_if_exists

__all__ = [
    "ensure_directories",
    "remove_if_exists",
]
