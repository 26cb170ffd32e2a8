"""
Basic Smith Chart Example

This example demonstrates how to draw a Smith chart grid with the
SmithCharts package: once through the one-call API, and once through a live
SmithChart whose configuration is changed between updates.

Output: PNG files with the default grid, a recolored denser grid, and a
reduced grid.
"""

import logging
from pathlib import Path

from smith_charts import Config, SmithChart, SmithChartsError, create_smith_chart
from smith_charts.calculations import constant_reactance_arc, constant_resistance_arc

logger = logging.getLogger("smith_charts.examples.basic_chart")

OUTPUT_DIR = Path("output")


def print_geometry() -> None:
    """Print the circles behind a few grid lines."""
    print("Constant-resistance circles (gamma plane):")
    for r in [0.5, 1, 2]:
        arc = constant_resistance_arc(r, 1e6, -1e6)
        print(f"  r={r:<4} center=({arc.cx:.3f}, {arc.cy:.3f}) radius={arc.radius:.3f}")

    print("Constant-reactance circles (gamma plane):")
    for x in [0.5, 1, 2]:
        arc = constant_reactance_arc(x, 0, 1e6)
        print(f"  x={x:<4} center=({arc.cx:.3f}, {arc.cy:.3f}) radius={arc.radius:.3f}")


def main() -> int:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print_geometry()

    try:
        path = create_smith_chart(output_path=OUTPUT_DIR / "smith_default.png")
        print(f"Default chart: {path}")

        # Live chart: setters are recorded, update() redraws
        chart = SmithChart(config=Config(margin=0.1))
        chart.update()

        chart.set_real_line_values([0.1, 0.2, 0.5, 0.75, 1, 2, 5, 10])
        chart.set_imag_line_values([0.1, 0.2, 0.3, 0.4, 0.5, 0.75, 1, 2, 5, 10])
        chart.set_real_line_color("orange")
        chart.set_imag_line_color("purple")
        chart.update()
        print(f"Dense chart: {chart.save_chart(str(OUTPUT_DIR / 'smith_dense.png'))}")

        chart.set_real_line_values([0.1, 0.5, 1, 10])
        chart.set_imag_line_values([0.1, 0.5, 1, 10])
        chart.update()
        print(f"Reduced chart: {chart.save_chart(str(OUTPUT_DIR / 'smith_reduced.png'))}")
        print(f"Rendered elements: {chart.rendered_counts()}")
        chart.close()

    except SmithChartsError as e:
        logger.error(f"Chart generation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
