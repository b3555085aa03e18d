#!/usr/bin/env python3
"""
RULER_CONFIG.PY - Default ruler parameters and JSON config loading

Config files are read-only inputs: values in the file overlay the
defaults, and command line flags overlay the file.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional

from ruler_models import InvalidParameterError

logger = logging.getLogger(__name__)

INT_KEYS = ("prime_limit", "odd_limit", "ruler_height")


@dataclass
class RulerConfig:
    """Everything needed to draw one ruler."""
    edo_values: List[int] = field(default_factory=lambda: [12])
    prime_limit: int = 7
    odd_limit: int = 15
    ruler_height: int = 1200  # pixels from 1/1 to 2/1
    output: str = "ruler.svg"


def _is_int(value) -> bool:
    # JSON true/false load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def get_defaults() -> RulerConfig:
    """Return default config values."""
    return RulerConfig()


def load_config(path: Optional[str] = None) -> RulerConfig:
    """Load config from a JSON file, falling back to defaults.

    A missing path (None) or a path that does not exist yields the
    defaults. Unknown keys are rejected.
    """
    config = get_defaults()
    if path is None:
        return config
    if not os.path.exists(path):
        logger.warning("Config file %s not found, using defaults", path)
        return config

    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise InvalidParameterError(f"Config file {path} must contain a JSON object")

    known = {f.name for f in fields(RulerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidParameterError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    values = asdict(config)
    values.update(data)
    if _is_int(values["edo_values"]):
        values["edo_values"] = [values["edo_values"]]

    if not isinstance(values["edo_values"], list) or not all(_is_int(v) for v in values["edo_values"]):
        raise InvalidParameterError(f"Config key 'edo_values' in {path} must be an integer "
                                    f"or a list of integers (got {values['edo_values']!r})")
    for key in INT_KEYS:
        if not _is_int(values[key]):
            raise InvalidParameterError(f"Config key '{key}' in {path} must be an integer "
                                        f"(got {values[key]!r})")
    if not isinstance(values["output"], str):
        raise InvalidParameterError(f"Config key 'output' in {path} must be a string "
                                    f"(got {values['output']!r})")
    logger.debug("Loaded config from %s: %s", path, values)
    return RulerConfig(**values)
