"""Loading of the class name to style fragment lookup table.

The table is plain JSON: an object mapping each class name to an object of
style properties, e.g. ``{"text-lg": {"fontSize": 18, "lineHeight": 28}}``.
"""

from __future__ import annotations

import importlib.resources
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pytwrn.exceptions import StylesLoadError

__all__ = ["StyleTable", "load_styles", "parse_styles"]

_logger = logging.getLogger(__name__)

StyleTable = dict[str, dict[str, Any]]

_TABLE_ADAPTER: TypeAdapter[StyleTable] = TypeAdapter(StyleTable)


def parse_styles(raw: str | bytes) -> StyleTable:
    """Parse and shape-check a JSON lookup table.

    Raises :class:`StylesLoadError` when *raw* is not JSON or not an
    object of objects. Property values are not inspected.
    """
    try:
        return _TABLE_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise StylesLoadError(f"Invalid style table: {exc.error_count()} error(s), first: {exc.errors()[0]['msg']}") from exc


def load_styles(path: Path | None = None) -> StyleTable:
    """Load a lookup table from *path*, or the table bundled with pytwrn.

    Parameters
    ----------
    path : Path or None
        JSON file to read. If ``None``, ``data/styles.json`` from the
        package data is used.

    Returns
    -------
    dict
        Mapping of class name to style fragment.
    """
    if path is not None:
        _logger.debug("Loading style table from %s", path)
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            raise StylesLoadError(f"Style table not readable: {path}") from exc
    else:
        _logger.debug("Loading style table from package data")
        try:
            ref = importlib.resources.files("pytwrn").joinpath("data/styles.json")
            raw = ref.read_bytes()
        except FileNotFoundError as exc:
            raise StylesLoadError("styles.json not found in package data") from exc

    styles = parse_styles(raw)
    _logger.debug("Style table loaded with %d classes", len(styles))
    return styles
