#!/usr/bin/env python3
"""
INIFOLD CONFIG - Fold Settings
------------------------------
Holds the knobs that drive folding and serialization and loads them from
a small YAML settings file, e.g.:

    boundary: 72
    line_terminator: "\\r\\n"
    origin: created

Author: IniFold Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML, YAMLError

from inifold.core.errors import InvalidArgumentError
from inifold.core.models import DEFAULT_BOUNDARY, ValueOrigin

logger = logging.getLogger("inifold.config")

ORIGIN_NAMES = {
    "read": ValueOrigin.READ,
    "created": ValueOrigin.CREATED,
}


@dataclass
class FoldSettings:
    """
    Settings for a folding session.

    boundary is the target column width, line_terminator is appended after
    every serialized comment and value line.
    """
    boundary: int = DEFAULT_BOUNDARY
    line_terminator: str = "\n"
    origin: ValueOrigin = ValueOrigin.CREATED

    @property
    def terminator_bytes(self) -> bytes:
        return self.line_terminator.encode("utf-8")


def settings_from_dict(data: Dict[str, Any]) -> FoldSettings:
    """Builds FoldSettings from a mapping, rejecting unknown or bad keys."""
    settings = FoldSettings()

    unknown = set(data) - {"boundary", "line_terminator", "origin"}
    if unknown:
        raise InvalidArgumentError(f"Unknown settings: {', '.join(sorted(unknown))}")

    if "boundary" in data:
        boundary = data["boundary"]
        if isinstance(boundary, bool) or not isinstance(boundary, int) or boundary < 0:
            raise InvalidArgumentError(f"boundary must be a non-negative integer, got {boundary!r}")
        settings.boundary = boundary

    if "line_terminator" in data:
        terminator = data["line_terminator"]
        if not isinstance(terminator, str) or not terminator:
            raise InvalidArgumentError("line_terminator must be a non-empty string")
        settings.line_terminator = terminator

    if "origin" in data:
        name = str(data["origin"]).lower()
        if name not in ORIGIN_NAMES:
            raise InvalidArgumentError(f"origin must be one of {sorted(ORIGIN_NAMES)}, got {name!r}")
        settings.origin = ORIGIN_NAMES[name]

    return settings


def load_settings(path: Union[str, Path]) -> FoldSettings:
    """
    Loads FoldSettings from a YAML file. An empty file yields the defaults.
    """
    settings_path = Path(path)
    yaml = YAML(typ='safe')

    try:
        data = yaml.load(settings_path.read_text(encoding='utf-8'))
    except FileNotFoundError:
        logger.error(f"Settings file not found: {settings_path}")
        raise InvalidArgumentError(f"Settings file not found: {settings_path}")
    except YAMLError as e:
        logger.error(f"Unable to parse settings from {settings_path}")
        raise InvalidArgumentError(f"Invalid settings file {settings_path}: {str(e)}")

    if data is None:
        return FoldSettings()
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Settings file {settings_path} must hold a mapping")

    settings = settings_from_dict(data)
    logger.debug(f"Loaded settings from {settings_path}: {settings}")
    return settings
