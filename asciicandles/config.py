"""Chart configuration.

Layout constants (stride, margins, buffer rows) and glyphs are tunable.
They are read from the ``[chart]`` table of
``~/.config/asciicandles/config.toml`` when that file exists:

    [chart]
    buffer = 1
    column_stride = 6

    [chart.glyphs]
    bullish_body = "#"
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "asciicandles" / "config.toml"


class GlyphSet(BaseModel):
    """Characters used to paint candles."""

    bullish_body: str = Field(
        default="█", min_length=1, max_length=1, description="Bullish body glyph"
    )
    bearish_body: str = Field(
        default="░", min_length=1, max_length=1, description="Bearish body glyph"
    )
    wick: str = Field(default="|", min_length=1, max_length=1, description="Wick glyph")

    model_config = {"frozen": True}


class ChartConfig(BaseModel):
    """Layout and pricing constants for one chart."""

    buffer: int = Field(
        default=1, ge=0, description="Blank rows kept above the high and below the low"
    )
    column_stride: int = Field(
        default=6, ge=1, description="Columns between neighbouring candle centers"
    )
    left_margin: int = Field(default=3, ge=0, description="Column of the first candle")
    separation_unit: float = Field(
        default=1.0, ge=0, description="Open nudge between same-direction candles"
    )
    baseline_price: float = Field(
        default=100.0, description="Synthetic price the first candle is anchored at"
    )
    initial_width: int = Field(default=7, ge=1, description="Canvas width before growth")
    initial_height: int = Field(default=7, ge=1, description="Canvas height before growth")
    glyphs: GlyphSet = Field(default_factory=GlyphSet, description="Candle glyphs")

    model_config = {"frozen": True}


def load_config(path: Optional[Path] = None) -> ChartConfig:
    """Load chart configuration from a TOML file.

    Args:
        path: Config file to read. Defaults to DEFAULT_CONFIG_PATH.

    Returns:
        ChartConfig built from the ``[chart]`` table, or defaults when the
        file is missing or cannot be parsed.

    Raises:
        pydantic.ValidationError: If the [chart] table is not a table or a
            configured value is out of range.
    """
    import toml

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return ChartConfig()

    try:
        data = toml.load(config_path)
    except (toml.TomlDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return ChartConfig()

    return ChartConfig.model_validate(data.get("chart", {}))
