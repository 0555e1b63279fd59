"""
Product identifier resource loader.

Reads the bundled ``IAP_ProductIDs`` resource: a flat list of product
identifier strings stored as a property list, JSON or YAML file.
"""

from __future__ import annotations

import json
import logging
import plistlib
from pathlib import Path
from typing import Any, FrozenSet, Iterable, List, Optional
from xml.parsers.expat import ExpatError

import yaml

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_NAME = "IAP_ProductIDs"
SUPPORTED_SUFFIXES = (".plist", ".json", ".yml", ".yaml")


def resolve_product_ids_path(directory: Path, name: str = DEFAULT_RESOURCE_NAME) -> Optional[Path]:
    """Return the first existing ``<name><suffix>`` file in ``directory``."""
    directory = Path(directory)
    for suffix in SUPPORTED_SUFFIXES:
        candidate = directory / f"{name}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def load_product_identifiers(path: Optional[Path]) -> Optional[List[str]]:
    """
    Load product identifiers from a resource file.

    Args:
        path: Resource file path. ``None`` means the resource could not be located.

    Returns:
        ``None`` if the resource is missing or unreadable. Otherwise the list of
        identifiers, which is empty when the content is not a list of strings.
    """
    if path is None:
        return None

    path = Path(path)
    if not path.is_file():
        return None

    try:
        data = _parse(path)
    except (OSError, ValueError, ExpatError, yaml.YAMLError) as e:
        logger.error("Failed to read product identifiers from %s: %s", path, e)
        return None

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        return []
    return list(data)


def dedupe_identifiers(identifiers: Iterable[str]) -> FrozenSet[str]:
    return frozenset(identifiers)


def _parse(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".plist":
        with open(path, "rb") as f:
            return plistlib.load(f)
    if suffix in {".yml", ".yaml"}:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
