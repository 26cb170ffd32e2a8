"""
Main API module for SmithCharts package.

This module provides simplified user-facing functions that wrap chart
construction, update and saving. `create_smith_chart()` draws a single chart;
`render_sequence()` pushes several configurations through one live chart and
saves a frame after each update.

Example:
    >>> from smith_charts import create_smith_chart, Config
    >>>
    >>> # Save to file
    >>> create_smith_chart(output_path="smith.png")

    >>> # Interactive use (returns figure and axes)
    >>> fig, ax = create_smith_chart(config=Config(real_line_color="orange"))
    >>> plt.show()
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt

from .config import Config
from .exceptions import RenderError, InvalidParameterError
from .logging_config import get_logger
from .rendering import SmithChart, MatplotlibSurface

logger = get_logger(__name__)

# Stages of the built-in demo: each dict holds setter overrides applied to the
# live chart before the next update.
DEMO_STAGES: List[Dict[str, Any]] = [
    {},
    {
        "real_line_values": [0.1, 0.2, 0.5, 0.75, 1, 2, 5, 10],
        "imag_line_values": [0.1, 0.2, 0.3, 0.4, 0.5, 0.75, 1, 2, 5, 10],
        "real_line_color": "orange",
        "imag_line_color": "purple",
        "margin": 0.05,
    },
    {
        "real_line_values": [0.1, 0.5, 1, 10],
        "imag_line_values": [0.1, 0.5, 1, 10],
    },
]

_STAGE_SETTERS = {
    "margin": "set_margin",
    "real_line_values": "set_real_line_values",
    "imag_line_values": "set_imag_line_values",
    "real_line_color": "set_real_line_color",
    "imag_line_color": "set_imag_line_color",
}


def _save_chart(chart: SmithChart, output_path: Path) -> str:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return chart.save_chart(str(output_path))
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"Failed to save chart to {output_path}: {e}") from e


def create_smith_chart(
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Draw a Smith chart grid.

    Args:
        output_path: Output file path; if None, returns (fig, ax) for interactive use
        config: Optional Config object; if None, uses default configuration

    Returns:
        If output_path provided: path to saved chart file
        If output_path is None: tuple of (figure, axes) for interactive use

    Raises:
        RenderError: If drawing or saving fails

    Example:
        >>> path = create_smith_chart(output_path="smith.png")
        >>> print(f"Chart saved to {path}")
    """
    if config is None:
        config = Config()
        logger.debug("Using default configuration")

    logger.info(
        f"Creating Smith chart: {len(config.real_line_values)} resistance, "
        f"{len(config.imag_line_values)} reactance values"
    )

    surface = MatplotlibSurface(config)
    chart = SmithChart(surface, config=config)
    try:
        chart.update()
    except Exception as e:
        chart.close()
        raise RenderError(f"Failed to render chart: {e}") from e

    if output_path is None:
        logger.info("Returning figure and axes for interactive use")
        return surface.fig, surface.ax

    output_path = Path(output_path)
    try:
        saved_path = _save_chart(chart, output_path)
    finally:
        chart.close()
    logger.info(f"Chart saved successfully to {saved_path}")
    return saved_path


def apply_stage(chart: SmithChart, stage: Dict[str, Any]) -> None:
    """
    Apply a dict of setter overrides to a live chart.

    Keys are Config field names handled by a chart setter: margin,
    real_line_values, imag_line_values, real_line_color, imag_line_color.

    Raises:
        InvalidParameterError: If a key has no matching setter
    """
    for key, value in stage.items():
        setter = _STAGE_SETTERS.get(key)
        if setter is None:
            available = ", ".join(_STAGE_SETTERS)
            raise InvalidParameterError(f"Unknown stage key '{key}'. Available keys: {available}")
        getattr(chart, setter)(value)


def render_sequence(
    stages: Sequence[Dict[str, Any]],
    output_dir: Union[str, Path],
    prefix: str = "smith",
    config: Optional[Config] = None,
    file_format: str = "png"
) -> List[str]:
    """
    Push a sequence of configuration changes through one chart.

    The same chart (and surface) is reused for every stage, so each update
    reconciles against the elements left by the previous one.

    Args:
        stages: Setter overrides per stage (see apply_stage); an empty dict
            redraws the current configuration
        output_dir: Directory for frame files
        prefix: Frame file name prefix
        config: Initial configuration
        file_format: Output suffix understood by Matplotlib ('png', 'svg', ...)

    Returns:
        Saved frame paths, one per stage

    Raises:
        InvalidParameterError: If a stage has an unknown key
        RenderError: If drawing or saving fails
    """
    if config is None:
        config = Config()
    output_dir = Path(output_dir)
    config = replace(config, output_dir=output_dir)
    config.ensure_directories()

    logger.info(f"Rendering {len(stages)} stage(s) into {output_dir}")

    chart = SmithChart(MatplotlibSurface(config), config=config)
    saved: List[str] = []
    try:
        for index, stage in enumerate(stages):
            apply_stage(chart, stage)
            try:
                chart.update()
            except Exception as e:
                raise RenderError(f"Failed to render stage {index}: {e}") from e
            frame_path = output_dir / f"{prefix}_{index:03d}.{file_format}"
            saved.append(_save_chart(chart, frame_path))
            logger.info(f"Stage {index} saved: {frame_path} {chart.rendered_counts()}")
    finally:
        chart.close()

    return saved
