"""Load default column sets per request kind from YAML (with fallbacks).

A ``columns.yaml`` next to the package may override any set::

    sets:
      case_details: [CASE_ID, TITLE, sHtmlBody, events]
      search: [ixBug, sTitle, ixStatus]

Entries are Column member names or wire names.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .columns import Column, resolve_column
from .config import DEFAULT_COLUMN_SETS

logger = logging.getLogger(__name__)

_CACHE: dict[str, list[Column]] | None = None


def _defaults() -> dict[str, list[Column]]:
    return {name: list(cols) for name, cols in DEFAULT_COLUMN_SETS.items()}


def _parse_set(name: str, raw) -> list[Column] | None:
    if not isinstance(raw, list):
        logger.warning("Column set %r is not a list; using default", name)
        return None
    out: list[Column] = []
    for entry in raw:
        try:
            out.append(resolve_column(str(entry)))
        except KeyError:
            logger.warning("Unknown column %r in set %r; using default", entry, name)
            return None
    return out


def _copy(sets: dict[str, list[Column]]) -> dict[str, list[Column]]:
    return {name: list(cols) for name, cols in sets.items()}


def load_column_sets(base_path: str | Path | None = None, *, refresh: bool = False) -> dict[str, list[Column]]:
    """Return the column sets, reading ``columns.yaml`` once per process.

    The result is a copy; mutating it does not affect later lookups.
    """
    global _CACHE
    if _CACHE is not None and not refresh:
        return _copy(_CACHE)
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    sets = _defaults()
    if not yaml_path.exists():
        _CACHE = sets
        return _copy(_CACHE)
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Could not read %s (%s); using default column sets", yaml_path, exc)
        _CACHE = sets
        return _copy(_CACHE)
    overrides = data.get("sets", {}) if isinstance(data, dict) else {}
    for name, raw in (overrides or {}).items():
        if name not in sets:
            logger.warning("Ignoring unknown column set %r in %s", name, yaml_path)
            continue
        parsed = _parse_set(name, raw)
        if parsed is not None:
            sets[name] = parsed
    _CACHE = sets
    return _copy(_CACHE)


def get_columns(set_name: str) -> list[Column]:
    return load_column_sets().get(set_name, [])
