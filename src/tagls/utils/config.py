"""Defaults for the ls command, read from ~/.config/tagls/config.toml."""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LsDefaults:
    """Values used when the matching ls option is not given on the command line."""

    format: str = "table"
    sort: tuple[str, ...] = ("file-name",)
    reverse: bool = False
    recursive: bool = False


def config_path() -> Path:
    return Path.home() / ".config" / "tagls" / "config.toml"


def _read_section(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring config file %s: %s", path, e)
        return {}

    section = data.get("ls", {})
    if not isinstance(section, dict):
        raise ValueError("'ls' must be a table")
    return section


def _expect(section: dict[str, Any], key: str, kind: type) -> Any:
    value = section[key]
    if not isinstance(value, kind):
        raise ValueError(f"'{key}' must be a {kind.__name__}, not {type(value).__name__}")
    return value


def load_ls_defaults(path: Path | None = None) -> LsDefaults:
    """Load the [ls] table of the config file.

    A missing or unreadable file gives the built-in defaults. Values of the
    wrong type raise ValueError; whether a format or sort key name is known is
    left to the command.
    """
    section = _read_section(path or config_path())
    values: dict[str, Any] = {}

    if "format" in section:
        values["format"] = _expect(section, "format", str)
    if "sort" in section:
        sort = section["sort"]
        keys = [sort] if isinstance(sort, str) else sort
        if not isinstance(keys, list) or not all(isinstance(key, str) for key in keys):
            raise ValueError("'sort' must be a string or a list of strings")
        values["sort"] = tuple(keys)
    for key in ("reverse", "recursive"):
        if key in section:
            values[key] = _expect(section, key, bool)

    unknown = set(section) - {"format", "sort", "reverse", "recursive"}
    if unknown:
        logger.debug("Unknown keys in [ls] of %s: %s", path or config_path(), ", ".join(sorted(unknown)))
    return LsDefaults(**values)
