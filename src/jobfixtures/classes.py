"""Location of compiled classes relative to a reference class."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jobfixtures.errors import InvalidArgumentError

CLASS_FILE_SUFFIX = ".class"


def validate_class_name(class_name: str) -> str:
    """Require a simple, unqualified class name."""

    if not isinstance(class_name, str) or not class_name.strip():
        raise InvalidArgumentError("class name must be a non-empty string")
    if any(sep in class_name for sep in (".", "/", "\\")):
        raise InvalidArgumentError(f"class name must be unqualified, got {class_name!r}")
    return class_name


@dataclass(frozen=True, slots=True)
class ReferenceClass:
    """Package and compiled-output directory of a known reference class.

    Sibling classes are expected to be compiled into the same directory and
    are packaged under the same package path.
    """

    package: str
    class_dir: Path

    @classmethod
    def from_output_root(cls, output_root: Path, package: str) -> "ReferenceClass":
        """Derive the class directory from a compiled-output root and a dotted package."""

        class_dir = output_root.joinpath(*package.split(".")) if package else output_root
        return cls(package=package, class_dir=class_dir)

    def class_file(self, class_name: str) -> Path:
        """Return the expected ``.class`` path for a sibling class."""

        return self.class_dir / f"{validate_class_name(class_name)}{CLASS_FILE_SUFFIX}"
