"""
Notation configuration.

Rendering tools differ on how they spell accidentals and compound
intervals. NotationConfig captures those choices; it can be built in
code or loaded from a YAML file:

    accidental_style: ascii
    show_naturals: false
    compound_numbers: true
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chuk_solfege.constants import AccidentalStyle

logger = logging.getLogger(__name__)


class NotationConfig(BaseModel):
    """How pitches, accidentals and intervals are rendered as text."""

    accidental_style: AccidentalStyle = Field(
        default=AccidentalStyle.UNICODE,
        description="Glyph set for accidentals",
    )
    show_naturals: bool = Field(
        default=True,
        description="Render the natural sign on unaltered pitches (C♮4 vs C4)",
    )
    compound_numbers: bool = Field(
        default=True,
        description="Render compound intervals by number (M10) instead of M3+1oct",
    )

    model_config = {"frozen": True}


DEFAULT_CONFIG = NotationConfig()


def load_config(path: str | Path) -> NotationConfig:
    """
    Load notation settings from a YAML file.

    A missing file or an empty document gives the defaults.

    Args:
        path: Path to the YAML file

    Returns:
        The parsed configuration

    Raises:
        pydantic.ValidationError: If the document has invalid values
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No notation config at {path}, using defaults")
        return DEFAULT_CONFIG

    with open(path) as f:
        data = yaml.safe_load(f)

    if not data:
        logger.info(f"Empty notation config at {path}, using defaults")
        return DEFAULT_CONFIG

    config = NotationConfig.model_validate(data)
    logger.info(f"Loaded notation config from {path}")
    return config
