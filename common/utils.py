"""Common utility functions."""

from __future__ import annotations

import os
import posixpath
import random
import string
from pathlib import Path
from typing import Callable

import yaml

# Generates a random suffix of the given length for object names.
NameGenerator = Callable[[int], str]

_NAME_CHARS = string.ascii_lowercase + string.digits


def random_string(length: int) -> str:
    """Generate a random lowercase alphanumeric string.

    Suitable for human-readable Kubernetes object names, not for secrets.
    """
    return "".join(random.choices(_NAME_CHARS, k=length))


def strip_ext(path: str) -> str:
    """Strip the file extension from a path, keeping its directory."""
    return os.path.splitext(path)[0]


def s3_key(s3_dir: str, category: str, local_path: str) -> str:
    """Build an S3 key whose leaf name matches the local file name."""
    return posixpath.join(s3_dir, category, os.path.basename(local_path))


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file."""
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def save_yaml(path: str | Path, data: dict) -> None:
    """Save data to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
