"""Single-class jar archive writer.

A jar is a zip container whose first entry is ``META-INF/MANIFEST.MF``. The
archives built here carry that manifest plus exactly one class entry whose
bytes are streamed from a compiled class file on disk.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, Final

from jobfixtures.utils.paths import remove_if_exists

LOGGER = logging.getLogger(__name__)

MANIFEST_NAME: Final = "META-INF/MANIFEST.MF"
MANIFEST_VERSION: Final = "1.0"
CREATED_BY: Final = "jobfixtures"
COPY_BUFFER_SIZE: Final = 1024


def build_manifest() -> bytes:
    """Return manifest bytes with CRLF line endings and a terminating blank line."""

    lines = [f"Manifest-Version: {MANIFEST_VERSION}", f"Created-By: {CREATED_BY}", "", ""]
    return "\r\n".join(lines).encode("utf-8")


def class_entry_name(package: str, class_name: str) -> str:
    """Entry path for a class: ``/<package path>/<ClassName>.class``."""

    package_path = package.replace(".", "/")
    if not package_path:
        return f"/{class_name}.class"
    return f"/{package_path}/{class_name}.class"


def _copy_stream(source: BinaryIO, target: BinaryIO, buffer_size: int) -> int:
    copied = 0
    chunk = source.read(buffer_size)
    while chunk:
        target.write(chunk)
        copied += len(chunk)
        chunk = source.read(buffer_size)
    return copied


def write_single_class_jar(
    jar_path: Path,
    class_file: Path,
    entry_name: str,
    *,
    buffer_size: int = COPY_BUFFER_SIZE,
    logger: logging.Logger | None = None,
) -> Path:
    """Write ``jar_path`` holding a manifest and the bytes of ``class_file``.

    The source is opened before the archive so a missing class never leaves
    an archive behind. A failure while writing removes the partial archive and
    re-raises the original error.
    """

    effective_logger = logger or LOGGER
    with class_file.open("rb") as source:
        try:
            with zipfile.ZipFile(jar_path, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
                archive.writestr(MANIFEST_NAME, build_manifest())
                entry = zipfile.ZipInfo(entry_name)
                entry.compress_type = zipfile.ZIP_DEFLATED
                with archive.open(entry, mode="w") as target:
                    copied = _copy_stream(source, target, buffer_size)
        except BaseException:
            remove_if_exists(jar_path, logger=effective_logger)
            raise
    effective_logger.debug("archive.written path=%s entry=%s bytes=%s", jar_path, entry_name, copied)
    return jar_path


def read_class_entries(jar_path: Path) -> dict[str, bytes]:
    """Return every non-manifest entry of an archive keyed by entry name."""

    entries: dict[str, bytes] = {}
    with zipfile.ZipFile(jar_path) as archive:
        for name in archive.namelist():
            if name == MANIFEST_NAME or name.endswith("/"):
                continue
            entries[name] = archive.read(name)
    return entries
