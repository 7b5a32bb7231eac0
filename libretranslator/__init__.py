# libretranslator/__init__.py
"""
LibreTranslator - interactive text translator

Types or pastes source text, sends it to a DeepL-compatible endpoint and
shows the result, re-translating automatically while the user types.
"""

from pathlib import Path


def _get_version() -> str:
    """Read the version from pyproject.toml.

    Falls back to the hard-coded version when the package is installed
    without its pyproject.toml next to it.
    """
    try:
        import tomllib

        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "0.0.0")
    except (OSError, tomllib.TOMLDecodeError):
        pass

    return "0.1.0"


__version__ = _get_version()
__app_name__ = "LibreTranslator"
