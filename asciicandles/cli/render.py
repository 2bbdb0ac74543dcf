"""Chart commands for asciicandles CLI.

Handles drawing charts from candle specifications, printing the sample
charts, and showing the effective configuration.
"""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from asciicandles.chart import CandleChart
from asciicandles.config import ChartConfig, GlyphSet, load_config
from asciicandles.models import Candle

console = Console()


KIND_ALIASES = {
    "bull": "bullish",
    "bullish": "bullish",
    "bear": "bearish",
    "bearish": "bearish",
}

# Sample charts: (title, [(kind, body, upper, lower), ...])
DEMO_CHARTS = [
    ("Single bearish candle", [("bearish", 3, 1, 2)]),
    ("Bearish to bullish", [("bearish", 3, 1, 2), ("bullish", 2, 1, 1)]),
    (
        "Alternating sizes",
        [
            ("bullish", 2, 1, 1),
            ("bearish", 3, 0, 1),
            ("bullish", 1, 1, 0),
            ("bearish", 2, 1, 2),
        ],
    ),
    (
        "Seven candle pattern",
        [
            ("bearish", 5, 1, 1),
            ("bearish", 2, 0, 1),
            ("bullish", 3, 0, 1),
            ("bullish", 1, 1, 0),
            ("bearish", 2, 2, 1),
            ("bullish", 3, 2, 0),
            ("bullish", 4, 1, 1),
        ],
    ),
]


def parse_candle_spec(text: str) -> Candle:
    """Parse a candle specification.

    Args:
        text: Spec in the form KIND:BODY,UPPER,LOWER, e.g. "bear:3,1,2".

    Returns:
        The parsed candle.

    Raises:
        ValueError: If the spec is malformed or a size is negative.
    """
    kind_part, sep, sizes_part = text.strip().partition(":")
    if not sep:
        raise ValueError(f"'{text}' is not of the form KIND:BODY,UPPER,LOWER")

    kind = KIND_ALIASES.get(kind_part.strip().lower())
    if kind is None:
        raise ValueError(f"Unknown candle kind '{kind_part}' (use bull or bear)")

    sizes = [s.strip() for s in sizes_part.split(",")]
    if len(sizes) != 3:
        raise ValueError(f"'{text}' needs exactly three sizes: BODY,UPPER,LOWER")

    try:
        body_size, upper_wick, lower_wick = (float(s) for s in sizes)
    except ValueError:
        raise ValueError(f"Sizes in '{text}' must be numbers") from None

    try:
        return Candle(
            kind=kind,
            body_size=body_size,
            upper_wick=upper_wick,
            lower_wick=lower_wick,
        )
    except ValidationError:
        raise ValueError(f"Sizes in '{text}' must not be negative") from None


def _parse_specs(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[Candle]:
    """Click callback turning SPEC arguments into candles."""
    try:
        return [parse_candle_spec(v) for v in value]
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def _load_config_or_exit(config_path: Optional[Path]) -> ChartConfig:
    try:
        return load_config(config_path)
    except ValidationError as e:
        console.print(Panel(
            f"[red]Invalid chart configuration:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)


def build_chart(candles: list[Candle], config: Optional[ChartConfig] = None) -> CandleChart:
    """Build a chart from candles in time order."""
    chart = CandleChart(config)
    for candle in candles:
        chart.add(candle)
    return chart


@click.command()
@click.argument("candles", nargs=-1, required=True, callback=_parse_specs, metavar="SPEC...")
@click.option("--axes", is_flag=True, help="Draw price and time axes.")
@click.option("--labels", is_flag=True, help="Label candles C1, C2, ... (implies --axes).")
@click.option("--markdown", is_flag=True, help="Wrap the chart in a markdown code block.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of ~/.config/asciicandles/config.toml.",
)
def render(
    candles: list[Candle],
    axes: bool,
    labels: bool,
    markdown: bool,
    config_path: Optional[Path],
) -> None:
    """Draw a chart from candle specs.

    Each SPEC is KIND:BODY,UPPER,LOWER with KIND bull or bear.
    The first candle anchors the chart; each following candle opens
    where the previous one closed.

    \b
    Examples:
      asciicandles render bear:3,1,2
      asciicandles render bear:3,1,2 bull:2,1,1 --labels
      asciicandles render bull:2,1,1 bull:1,0,0 --markdown
    """
    config = _load_config_or_exit(config_path)
    chart = build_chart(candles, config)

    if axes or labels:
        chart.with_axes()
    if labels:
        chart.with_annotations()

    text = chart.to_markdown() if markdown else chart.render()
    click.echo(text)


@click.command()
@click.option("--markdown", is_flag=True, help="Wrap each chart in a markdown code block.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of ~/.config/asciicandles/config.toml.",
)
def demo(markdown: bool, config_path: Optional[Path]) -> None:
    """Print a few sample charts using the configured layout and glyphs."""
    chart_config = _load_config_or_exit(config_path)
    for title, specs in DEMO_CHARTS:
        chart = build_chart([
            Candle(kind=kind, body_size=body, upper_wick=upper, lower_wick=lower)
            for kind, body, upper, lower in specs
        ], chart_config)
        chart.with_axes().with_annotations()
        text = chart.to_markdown() if markdown else chart.render()

        console.print(Panel(
            Text(text),
            title=f"[bold]{title}[/bold]",
            border_style="cyan",
            expand=False,
        ))


@click.command()
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to show instead of ~/.config/asciicandles/config.toml.",
)
def config(config_path: Optional[Path]) -> None:
    """Show the effective chart configuration."""
    chart_config = _load_config_or_exit(config_path)

    table = Table(
        title="Chart Configuration",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_column("Description", style="dim")

    for name, field in ChartConfig.model_fields.items():
        if name == "glyphs":
            continue
        table.add_row(name, str(getattr(chart_config, name)), field.description or "")

    for name, field in GlyphSet.model_fields.items():
        table.add_row(f"glyphs.{name}", repr(getattr(chart_config.glyphs, name)), field.description or "")

    console.print(table)
