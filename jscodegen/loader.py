"""Load a Swagger 2.0 document from disk.

JSON is the default; files ending in .yaml/.yml are read with PyYAML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import SpecError

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_spec(path: Path | str) -> dict[str, Any]:
    """Load a Swagger document from a JSON or YAML file."""
    spec_file = Path(path)
    text = spec_file.read_text(encoding="utf-8")
    if spec_file.suffix.lower() in _YAML_SUFFIXES:
        spec = yaml.safe_load(text)
    else:
        spec = json.loads(text)
    if not isinstance(spec, dict):
        raise SpecError(f"{spec_file} does not contain a Swagger document object")
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def get_definitions(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract schema definitions from the spec."""
    return spec.get("definitions") or {}


def ref_name(ref: str) -> str:
    """Return the name a $ref points at, e.g. '#/parameters/limit' -> 'limit'."""
    return ref.rsplit("/", 1)[-1]
