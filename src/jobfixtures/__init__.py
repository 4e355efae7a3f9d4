"""Fixture generation for job-platform integration tests."""

from jobfixtures.classes import ReferenceClass
from jobfixtures.config import (
    DEFAULT_SCRATCH_DIR,
    SCRATCH_DIR_KEY,
    AppSettings,
    ConfigurationProvider,
    MappingConfiguration,
    SettingsConfiguration,
    load_settings,
)
from jobfixtures.content import iter_input_lines, verify_input_file
from jobfixtures.errors import (
    ClassNotFoundOnDiskError,
    FixtureError,
    FixtureIOError,
    InvalidArgumentError,
)
from jobfixtures.factory import FixtureFactory
from jobfixtures.naming import generate_random_filename

__all__ = [
    "AppSettings",
    "ClassNotFoundOnDiskError",
    "ConfigurationProvider",
    "DEFAULT_SCRATCH_DIR",
    "FixtureError",
    "FixtureFactory",
    "FixtureIOError",
    "InvalidArgumentError",
    "MappingConfiguration",
    "ReferenceClass",
    "SCRATCH_DIR_KEY",
    "SettingsConfiguration",
    "generate_random_filename",
    "iter_input_lines",
    "load_settings",
    "verify_input_file",
]
