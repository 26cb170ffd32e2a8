"""
Configuration management for SmithCharts package.

This module provides the chart configuration (grid line values, colors,
margin) together with output settings such as figure size and DPI.
"""

import json
import yaml
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import List

from .constants import (
    DEFAULT_MARGIN,
    DEFAULT_REAL_LINE_VALUES,
    DEFAULT_IMAG_LINE_VALUES,
    DEFAULT_LINE_COLOR,
    DEFAULT_INFINITY,
    LINE_STROKE_WIDTH,
    DEFAULT_DPI,
    DEFAULT_FIGURE_SIZE,
    DEFAULT_BACKGROUND_COLOR,
)
from .exceptions import ConfigError, InvalidParameterError


@dataclass
class Config:
    """Configuration for Smith chart generation.

    Attributes:
        margin: Blank border around the unit disk, as a fraction of its diameter.
        real_line_values: Normalized resistances drawn as constant-resistance circles.
            Duplicates are allowed and produce duplicate circles.
        imag_line_values: Normalized reactance magnitudes drawn as constant-reactance
            arcs; each value yields a positive and a negative arc.
        real_line_color: Stroke color of resistance circles and the outer circle.
        imag_line_color: Stroke color of reactance arcs and the zero-reactance line.
        stroke_width: Line width in surface units (the unit disk spans 1.0).
        infinity: Finite bound used in place of infinite reactance/resistance
            when computing arc endpoints.
        default_dpi: Resolution for output images (dots per inch).
        figure_size: Width and height of generated figures in inches.
        background_color: Figure background color (any Matplotlib color spec).
        output_dir: Directory for saving generated charts.
    """

    margin: float = DEFAULT_MARGIN
    real_line_values: List[float] = field(default_factory=lambda: list(DEFAULT_REAL_LINE_VALUES))
    imag_line_values: List[float] = field(default_factory=lambda: list(DEFAULT_IMAG_LINE_VALUES))
    real_line_color: str = DEFAULT_LINE_COLOR
    imag_line_color: str = DEFAULT_LINE_COLOR
    stroke_width: float = LINE_STROKE_WIDTH
    infinity: float = DEFAULT_INFINITY
    default_dpi: int = DEFAULT_DPI
    figure_size: float = DEFAULT_FIGURE_SIZE
    background_color: str = DEFAULT_BACKGROUND_COLOR
    output_dir: Path = field(default_factory=lambda: Path("./output"))

    def __post_init__(self):
        """Convert string paths to Path objects if necessary."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json).

        Returns:
            Config instance with loaded settings.

        Raises:
            ConfigError: If the file is missing, unreadable, or has an
                unsupported format or unknown keys.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            try:
                if path.suffix in ['.yaml', '.yml']:
                    data = yaml.safe_load(f)
                elif path.suffix == '.json':
                    data = json.load(f)
                else:
                    raise ConfigError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigError(f"Failed to parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {path} must contain a mapping")

        if 'output_dir' in data:
            data['output_dir'] = Path(data['output_dir'])

        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    def save_to_file(self, path: Path) -> None:
        """Save configuration to a YAML or JSON file.

        Args:
            path: Path where configuration should be saved.

        Raises:
            ConfigError: If file format is not supported.
        """
        path = Path(path)
        if path.suffix not in ['.yaml', '.yml', '.json']:
            raise ConfigError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
        path.parent.mkdir(parents=True, exist_ok=True)

        data = asdict(self)
        data['output_dir'] = str(data['output_dir'])

        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(data, f, indent=2)

    def validate(self) -> bool:
        """Validate configuration parameters.

        Chart setters never call this; degenerate values are drawn as-is.
        The CLI and file loaders use it to reject obviously bad input early.

        Returns:
            True if configuration is valid.

        Raises:
            InvalidParameterError: If any configuration parameter is invalid.
        """
        if self.margin < 0:
            raise InvalidParameterError("margin must be non-negative")

        for name in ("real_line_values", "imag_line_values"):
            values = getattr(self, name)
            if any(v <= 0 for v in values):
                raise InvalidParameterError(f"{name} must contain only positive values")

        for name in ("real_line_color", "imag_line_color", "background_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidParameterError(f"{name} must be a non-empty string")

        if self.stroke_width <= 0:
            raise InvalidParameterError("stroke_width must be positive")

        if self.infinity <= 1:
            raise InvalidParameterError("infinity must be a large positive number")

        if self.default_dpi <= 0:
            raise InvalidParameterError("default_dpi must be positive")

        if self.figure_size <= 0:
            raise InvalidParameterError("figure_size must be positive")

        return True

    def ensure_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """
    Get a Config instance with default settings.

    Returns:
        Config instance initialized with default values.
    """
    return Config()
