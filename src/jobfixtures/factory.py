"""Fixture factory for job-platform integration tests.

``FixtureFactory`` produces the two fixture kinds the test suite needs:
integer-sequence input files under random names, and single-class jar
archives built from classes that are already compiled on disk. Both land in
the scratch directory resolved through the injected configuration.

Stale files are removed before writing on a best-effort basis. This
removal and the following create are not atomic, so concurrent callers
targeting the same archive name must serialize themselves.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from jobfixtures.archive import class_entry_name, write_single_class_jar
from jobfixtures.classes import ReferenceClass, validate_class_name
from jobfixtures.config import DEFAULT_SCRATCH_DIR, SCRATCH_DIR_KEY, ConfigurationProvider
from jobfixtures.content import iter_input_lines, validate_limit
from jobfixtures.errors import ClassNotFoundOnDiskError
from jobfixtures.naming import generate_random_filename
from jobfixtures.utils.paths import remove_if_exists

LOGGER = logging.getLogger(__name__)

JAR_SUFFIX = ".jar"


class FixtureFactory:
    """Generate input files and class archives in a configured scratch directory."""

    def __init__(
        self,
        config: ConfigurationProvider,
        reference: ReferenceClass,
        *,
        scratch_dir_key: str = SCRATCH_DIR_KEY,
        default_scratch_dir: str = DEFAULT_SCRATCH_DIR,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.reference = reference
        self.scratch_dir_key = scratch_dir_key
        self.default_scratch_dir = default_scratch_dir
        self._rng = rng or random.Random()
        self._logger = logger or LOGGER

    def generate_random_filename(self) -> str:
        """Return a 16 hex character name with a ``.dat`` suffix."""

        return generate_random_filename(self._rng)

    def get_temp_dir(self) -> str:
        """Return the configured scratch directory, or the default when unset."""

        return self.config.get_string(self.scratch_dir_key, self.default_scratch_dir)

    def create_input_file(self, limit: int) -> Path:
        """Write ``0`` through ``limit - 1``, one per line, to a new random file.

        Raises ``InvalidArgumentError`` for a negative limit before touching the
        filesystem. Filesystem errors propagate unchanged.
        """

        validate_limit(limit)
        input_file = Path(self.get_temp_dir()) / self.generate_random_filename()
        remove_if_exists(input_file, logger=self._logger)

        with input_file.open("x", encoding="ascii", newline="\n") as handle:
            try:
                for line in iter_input_lines(limit):
                    handle.write(line)
            except BaseException:
                remove_if_exists(input_file, logger=self._logger)
                raise

        self._logger.info("fixtures.input_file_created path=%s lines=%s", input_file, limit)
        return input_file

    def create_jar_file(self, class_name: str) -> Path:
        """Package the compiled ``class_name`` into ``<scratch>/<class_name>.jar``.

        The class is looked up next to the reference class and stored under the
        reference package path. Raises ``ClassNotFoundOnDiskError`` when the
        compiled class file is missing.
        """

        validate_class_name(class_name)
        class_file = self.reference.class_file(class_name)
        if not class_file.is_file():
            raise ClassNotFoundOnDiskError(class_name, class_file)

        jar_file = Path(self.get_temp_dir()) / f"{class_name}{JAR_SUFFIX}"
        remove_if_exists(jar_file, logger=self._logger)

        entry_name = class_entry_name(self.reference.package, class_name)
        write_single_class_jar(jar_file, class_file, entry_name, logger=self._logger)
        self._logger.info("fixtures.jar_file_created path=%s entry=%s", jar_file, entry_name)
        return jar_file
