"""
NamingConfig: project-level display-name formatting.

This module provides:

- find_config_file: Walk up directories to locate .kaselab.toml
- NamingConfig: Typed formatting options with load/from_dict constructors

Configuration is explicit: nothing in kaselab reads it implicitly. Load it
once (e.g. in conftest.py) and build label sets from it:

    >>> config = NamingConfig.load()
    >>> config.labels(2, "dialect")
    KaseLabels(labels=('dialect', 'a2'), delimiter='=', ...)

File format::

    [naming]
    delimiter = "="
    separator = ", "
    prefix = ""
    postfix = ""
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from kaselab.labels import (
    DELIMITER_DEFAULT,
    POSTFIX_DEFAULT,
    PREFIX_DEFAULT,
    SEPARATOR_DEFAULT,
    KaseLabels,
    labels,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".kaselab.toml"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """
    Walk up from *start_dir* to find `.kaselab.toml`.

    Args:
        start_dir: Directory to start searching from. Defaults to ``Path.cwd()``.

    Returns:
        Path to the config file, or ``None`` if not found.
    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None


@dataclass(frozen=True)
class NamingConfig:
    """
    Display-name formatting from the ``[naming]`` table.

    Attributes:
        delimiter: Between a label and its value.
        separator: Between elements.
        prefix: Before the name.
        postfix: After the name.
    """

    delimiter: str = DELIMITER_DEFAULT
    separator: str = SEPARATOR_DEFAULT
    prefix: str = PREFIX_DEFAULT
    postfix: str = POSTFIX_DEFAULT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NamingConfig:
        """
        Create a config from parsed TOML data.

        Missing keys keep their defaults.

        Raises:
            TypeError: If ``naming`` is not a table, or a value is not a string.
            ValueError: If the ``[naming]`` table has unknown keys.
        """
        naming = data.get("naming", {})
        if not isinstance(naming, dict):
            raise TypeError(f"[naming] must be a table, got {naming!r}")
        known = {f.name for f in fields(cls)}
        unknown = set(naming) - known
        if unknown:
            raise ValueError(
                f"Unknown [naming] key(s): {sorted(unknown)}. "
                f"Valid keys are: {sorted(known)}"
            )
        for key, value in naming.items():
            if not isinstance(value, str):
                raise TypeError(f"[naming] {key} must be a string, got {value!r}")
        return cls(**naming)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> NamingConfig:
        """
        Find and load `.kaselab.toml`.

        Raises:
            FileNotFoundError: If no config file is found.
        """
        config_path = find_config_file(start_dir)
        if config_path is None:
            raise FileNotFoundError(
                f"Could not find {CONFIG_FILENAME} in {start_dir or Path.cwd()} "
                f"or any parent directory"
            )
        logger.debug(f"Loading naming config from {config_path}")
        with open(config_path, "rb") as f:
            return cls.from_dict(tomllib.load(f))

    def labels(self, arity: int, *names: str | None) -> KaseLabels:
        """Build a label set of *arity* positions with this formatting."""
        return labels(
            *names,
            arity=arity,
            delimiter=self.delimiter,
            separator=self.separator,
            prefix=self.prefix,
            postfix=self.postfix,
        )


def load_config(start_dir: Path | None = None) -> NamingConfig:
    """
    Load the nearest `.kaselab.toml`, or the defaults when there is none.
    """
    if find_config_file(start_dir) is None:
        return NamingConfig()
    return NamingConfig.load(start_dir)
