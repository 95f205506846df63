from __future__ import annotations

from pathlib import Path

import typer

from .. import __version__
from ..chart.chart import Chart, render_chart
from ..chart.series import ContinuousSeries, TimeSeries
from ..chart.style import Style
from ..core.config import OUTPUT_FORMATS, get_settings
from ..core.definition import (
    load_chart_definition,
    parse_datetimes,
    parse_floats,
    read_csv_columns,
)
from ..core.errors import ChartError
from ..core.logging_config import get_logger, setup_logging
from ..render import renderer_for_format
from . import output as cli_output

app = typer.Typer(help="PixelChart CLI")

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Configure global CLI options."""
    settings = get_settings()
    setup_logging(json_output=json_logs, log_level=log_level, log_dir=settings.log_dir)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


def _resolve_format(out: Path, output_format: str | None) -> str:
    """Explicit --format wins, then the output suffix, then settings."""
    if output_format:
        fmt = output_format.lower()
    elif out.suffix.lower().lstrip(".") in OUTPUT_FORMATS:
        fmt = out.suffix.lower().lstrip(".")
    else:
        fmt = get_settings().output_format
    if fmt not in OUTPUT_FORMATS:
        cli_output.error(f"Unsupported format '{fmt}'. Use one of: {', '.join(OUTPUT_FORMATS)}.")
        raise typer.Exit(code=1)
    return fmt


def _write_chart(chart: Chart, out: Path, fmt: str) -> None:
    provider = renderer_for_format(fmt, dpi=get_settings().dpi if fmt == "png" else None)
    out.parent.mkdir(parents=True, exist_ok=True)
    cli_output.info(f"Rendering {len(chart.series)} series as {fmt.upper()}")
    try:
        with out.open("wb") as sink:
            render_chart(chart, provider, sink)
    except ChartError as e:
        # Remove the partial file so a failed render leaves no output behind.
        out.unlink(missing_ok=True)
        logger.error("Render failed", extra={"out": str(out), "error": str(e)})
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        out.unlink(missing_ok=True)
        logger.exception("Writing chart failed", extra={"out": str(out)})
        cli_output.error(f"Failed to write {out}: {e}")
        raise typer.Exit(code=1) from e
    cli_output.success(f"Chart written to {out}")


@app.command("render")
def render_definition(
    definition: Path = typer.Argument(..., help="Chart definition YAML file"),  # noqa: B008
    out: Path = typer.Option(..., "--out", "-o", help="Output file path (.png or .svg)"),  # noqa: B008
    output_format: str | None = typer.Option(
        None, "--format", help="Output format: png|svg (defaults to the --out suffix)"
    ),
) -> None:
    """Render a chart described by a YAML definition file."""
    fmt = _resolve_format(out, output_format)
    try:
        chart = load_chart_definition(definition)
    except ChartError as e:
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e
    _write_chart(chart, out, fmt)


@app.command("plot")
def plot_csv(
    csv_path: Path = typer.Argument(..., help="CSV file with a header row"),  # noqa: B008
    x: str = typer.Option(..., "--x", help="Column holding x values"),
    y: str = typer.Option(..., "--y", help="Comma-separated column(s) to plot as series"),
    out: Path = typer.Option(..., "--out", "-o", help="Output file path (.png or .svg)"),  # noqa: B008
    output_format: str | None = typer.Option(None, "--format", help="Output format: png|svg"),
    title: str = typer.Option("", help="Chart title"),
    width: int = typer.Option(1024, min=1, help="Chart width in pixels"),
    height: int = typer.Option(400, min=1, help="Chart height in pixels"),
    axes: bool = typer.Option(True, "--axes/--no-axes", help="Draw axes and tick labels"),
    final_labels: bool = typer.Option(
        True,
        "--final-labels/--no-final-labels",
        help="Label each series' last value; also reserves the right margin the Y tick labels use",
    ),
    time: bool = typer.Option(False, "--time", help="Parse x values as ISO timestamps"),
) -> None:
    """Plot one or more CSV columns as line series."""
    fmt = _resolve_format(out, output_format)
    y_columns = [c.strip() for c in y.split(",") if c.strip()]
    if not y_columns:
        cli_output.error("--y must name at least one column.")
        raise typer.Exit(code=1)

    try:
        columns = read_csv_columns(csv_path, [x, *y_columns])
        blank = [c for c in y_columns if not any((v or "").strip() for v in columns[c])]
        for c in blank:
            cli_output.warning(f"Column '{c}' has no values; skipping it.")
        y_columns = [c for c in y_columns if c not in blank]
        if not y_columns:
            cli_output.error("None of the --y columns have values to plot.")
            raise typer.Exit(code=1)
        if time:
            x_values = parse_datetimes(columns[x], f"column '{x}'")
            series = [
                TimeSeries(name=c, x_values=x_values, y_values=parse_floats(columns[c], f"column '{c}'"))
                for c in y_columns
            ]
        else:
            x_numbers = parse_floats(columns[x], f"column '{x}'")
            series = [
                ContinuousSeries(name=c, x_values=x_numbers, y_values=parse_floats(columns[c], f"column '{c}'"))
                for c in y_columns
            ]
    except ChartError as e:
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    chart = Chart(
        series=series,
        width=width,
        height=height,
        title=title,
        title_style=Style(show=bool(title)),
        axes=Style(show=axes),
        final_value_label=Style(show=final_labels),
    )
    _write_chart(chart, out, fmt)


if __name__ == "__main__":
    app()
