import logging
from pathlib import Path

import pytest

from jobfixtures.classes import ReferenceClass
from jobfixtures.config import SCRATCH_DIR_KEY, MappingConfiguration
from jobfixtures.factory import FixtureFactory

REFERENCE_PACKAGE = "eu.stratosphere.nephele.jobmanager"

# Not a real class file; only the bytes matter to the archive writer.
FAKE_CLASS_BYTES = bytes([0xCA, 0xFE, 0xBA, 0xBE, 0x00, 0x00, 0x00, 0x32]) + bytes(range(256)) * 9


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    d = tmp_path / "scratch"
    d.mkdir()
    return d


@pytest.fixture
def reference(tmp_path: Path) -> ReferenceClass:
    """Compiled-output tree with the reference package directory created."""
    ref = ReferenceClass.from_output_root(tmp_path / "classes", REFERENCE_PACKAGE)
    ref.class_dir.mkdir(parents=True)
    return ref


@pytest.fixture
def compiled_class(reference: ReferenceClass):
    def _make(class_name: str = "SampleClass", data: bytes = FAKE_CLASS_BYTES) -> Path:
        p = reference.class_dir / f"{class_name}.class"
        p.write_bytes(data)
        return p
    return _make


@pytest.fixture
def factory(scratch_dir: Path, reference: ReferenceClass) -> FixtureFactory:
    config = MappingConfiguration({SCRATCH_DIR_KEY: str(scratch_dir)})
    return FixtureFactory(config, reference)
