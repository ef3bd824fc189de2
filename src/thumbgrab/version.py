"""Version management for ThumbGrab."""

import tomllib
from importlib import metadata
from pathlib import Path


def get_version() -> str:
    """Get the current version from pyproject.toml, else the installed metadata."""
    project_root = Path(__file__).parent.parent.parent
    pyproject_path = project_root / "pyproject.toml"

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
            return data["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        pass

    try:
        return metadata.version("thumbgrab")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
