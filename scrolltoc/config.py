"""Configuration loader for the scroll-synchronised table of contents."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Scroll TOC"
    version: str = "1.0.0"


class HeadingConfig(BaseModel):
    """Heading discovery configuration."""

    target: str | None = None  # CSS selector of the scope; None = whole document
    levels: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5, 6])


class OffsetConfig(BaseModel):
    """Offset index configuration."""

    deduction: float = 0.0  # e.g. height of a fixed header bar


class ParserConfig(BaseModel):
    """HTML parser configuration."""

    features: str = "lxml"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    headings: HeadingConfig = Field(default_factory=HeadingConfig)
    offsets: OffsetConfig = Field(default_factory=OffsetConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override the header deduction from environment
    deduction = os.getenv("TOC_OFFSET_DEDUCTION")
    if deduction:
        config.offsets.deduction = float(deduction)

    return config
