"""Build charts from YAML definition files.

A definition looks like::

    title: Daily signups
    width: 800
    height: 400
    axes: {show: true}
    final_value_label: {show: true}
    y_range: {min: 0, max: 100}
    series:
      - name: web
        kind: time
        csv: data/signups.csv
        x_column: date
        y_column: web
        style: {stroke_color: "#0074d9", stroke_width: 2}
      - name: target
        x: [0, 1, 2]
        y: [10, 20, 30]

Relative CSV paths resolve against the definition file's directory.
"""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from ..chart.chart import Chart
from ..chart.defaults import DEFAULTS
from ..chart.ranges import Range
from ..chart.series import DEFAULT_DATE_FORMAT, ContinuousSeries, TimeSeries
from ..chart.style import Padding, Style
from ..core.errors import DefinitionError
from ..render.fonts import load_font
from .logging_config import get_logger

logger = get_logger(__name__)

STYLE_KEYS = ("title_style", "background", "canvas", "axes", "final_value_label")
SERIES_KINDS = ("continuous", "time")


def read_csv_columns(path: Path, columns: list[str]) -> dict[str, list[str]]:
    """Read selected columns from a CSV file with a header row.

    Raises:
        DefinitionError: If the file is missing or a column is absent
    """
    if not path.exists():
        raise DefinitionError(f"CSV file not found: {path}")
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        header = reader.fieldnames or []
        missing = [c for c in columns if c not in header]
        if missing:
            raise DefinitionError(
                f"CSV file {path} is missing column(s): {', '.join(missing)}"
            )
        values: dict[str, list[str]] = {c: [] for c in columns}
        for row in reader:
            for c in columns:
                values[c].append(row[c])
    return values


def parse_floats(raw: list[Any], label: str) -> list[float]:
    try:
        return [float(v) for v in raw]
    except (TypeError, ValueError) as e:
        raise DefinitionError(f"Non-numeric value in {label}: {e}") from e


def parse_datetimes(raw: list[Any], label: str) -> list[datetime]:
    parsed = []
    for v in raw:
        if isinstance(v, datetime):
            parsed.append(v)
            continue
        try:
            parsed.append(datetime.fromisoformat(str(v)))
        except ValueError as e:
            raise DefinitionError(f"Invalid timestamp in {label}: {v!r}") from e
    return parsed


def _optional_number(cfg: dict[str, Any], key: str, cast: type, label: str) -> Any:
    """Coerce ``cfg[key]`` with ``cast``; absent or null stays None."""
    value = cfg.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise DefinitionError(f"{label} '{key}' must be a number, got {value!r}")
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise DefinitionError(f"{label} '{key}' must be a number, got {value!r}") from e


def _mapping(value: Any, label: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DefinitionError(f"{label} must be a mapping, got {type(value).__name__}")
    return value


def parse_style(cfg: dict[str, Any] | None) -> Style:
    if not cfg:
        return Style()
    cfg = _mapping(cfg, "Style")
    padding_cfg = _mapping(cfg.get("padding") or {}, "Style padding")
    padding = Padding(
        **{
            side: _optional_number(padding_cfg, side, int, "Padding")
            for side in ("top", "left", "right", "bottom")
        }
    )
    return Style(
        show=bool(cfg.get("show", False)),
        stroke_color=cfg.get("stroke_color"),
        stroke_width=_optional_number(cfg, "stroke_width", float, "Style"),
        fill_color=cfg.get("fill_color"),
        font_size=_optional_number(cfg, "font_size", float, "Style"),
        font_color=cfg.get("font_color"),
        padding=padding,
    )


def parse_range(cfg: dict[str, Any] | None) -> Range | None:
    if not cfg:
        return None
    try:
        lo = float(cfg["min"])
        hi = float(cfg["max"])
    except (KeyError, TypeError, ValueError) as e:
        raise DefinitionError(f"Range needs numeric 'min' and 'max': {cfg}") from e
    if lo > hi:
        raise DefinitionError(f"Range min {lo} is greater than max {hi}")
    return Range(min=lo, max=hi)


def parse_series(cfg: dict[str, Any], base_dir: Path) -> ContinuousSeries | TimeSeries:
    cfg = _mapping(cfg, "Series entry")
    name = str(cfg.get("name", ""))
    kind = cfg.get("kind", "continuous")
    if kind not in SERIES_KINDS:
        raise DefinitionError(f"Series '{name}' has unknown kind '{kind}'")

    if "csv" in cfg:
        x_col = cfg.get("x_column", "x")
        y_col = cfg.get("y_column", "y")
        csv_path = Path(str(cfg["csv"]))
        if not csv_path.is_absolute():
            csv_path = base_dir / csv_path
        columns = read_csv_columns(csv_path, [x_col, y_col])
        raw_x, raw_y = columns[x_col], columns[y_col]
    else:
        raw_x, raw_y = cfg.get("x", []), cfg.get("y", [])
        for axis, raw in (("x", raw_x), ("y", raw_y)):
            if not isinstance(raw, list):
                raise DefinitionError(
                    f"Series '{name}' {axis} values must be a list, got {type(raw).__name__}"
                )

    if len(raw_x) != len(raw_y):
        raise DefinitionError(
            f"Series '{name}' has {len(raw_x)} x values but {len(raw_y)} y values"
        )

    style = parse_style(cfg.get("style"))
    y_values = parse_floats(raw_y, f"series '{name}' y")
    if kind == "time":
        return TimeSeries(
            name=name,
            x_values=parse_datetimes(raw_x, f"series '{name}' x"),
            y_values=y_values,
            style=style,
            date_format=cfg.get("date_format", DEFAULT_DATE_FORMAT),
        )
    return ContinuousSeries(
        name=name,
        x_values=parse_floats(raw_x, f"series '{name}' x"),
        y_values=y_values,
        style=style,
    )


def build_chart(data: dict[str, Any], base_dir: Path | None = None) -> Chart:
    """Build a Chart from an already-parsed definition mapping."""
    if not isinstance(data, dict):
        raise DefinitionError("Chart definition must be a mapping")
    base_dir = base_dir or Path.cwd()

    series_cfg = data.get("series") or []
    if not isinstance(series_cfg, list):
        raise DefinitionError("'series' must be a list")
    series = [parse_series(s, base_dir) for s in series_cfg]

    font = None
    if data.get("font"):
        font_path = Path(data["font"])
        if not font_path.is_absolute():
            font_path = base_dir / font_path
        font = load_font(font_path)

    styles = {key: parse_style(data.get(key)) for key in STYLE_KEYS}
    # A title given without a title style is shown.
    if data.get("title") and "title_style" not in data:
        styles["title_style"] = Style(show=True)

    try:
        width = int(data.get("width", DEFAULTS.chart_width))
        height = int(data.get("height", DEFAULTS.chart_height))
    except (TypeError, ValueError) as e:
        raise DefinitionError(f"Chart width and height must be integers: {e}") from e

    return Chart(
        series=series,
        width=width,
        height=height,
        title=str(data.get("title", "")),
        x_range=parse_range(data.get("x_range")),
        y_range=parse_range(data.get("y_range")),
        font=font,
        **styles,
    )


def load_chart_definition(path: str | Path) -> Chart:
    """Load a chart definition YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Chart ready to render

    Raises:
        DefinitionError: If the file is missing or invalid
        FontError: If the definition names a font that cannot be loaded
    """
    def_path = Path(path)
    if not def_path.exists():
        raise DefinitionError(f"Chart definition not found: {def_path}")
    try:
        data = yaml.safe_load(def_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        logger.error("Invalid chart definition YAML", extra={"path": str(def_path), "error": str(e)})
        raise DefinitionError(f"Invalid YAML in {def_path}: {e}") from e

    chart = build_chart(data, base_dir=def_path.parent)
    logger.debug(
        "Chart definition loaded",
        extra={"path": str(def_path), "series": len(chart.series)},
    )
    return chart
