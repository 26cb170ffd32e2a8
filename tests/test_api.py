import logging

import matplotlib.pyplot as plt
import pytest

from smith_charts import create_smith_chart, render_sequence, SmithChart
from smith_charts.api import DEMO_STAGES, apply_stage
from smith_charts.cli import main
from smith_charts.config import Config
from smith_charts.exceptions import InvalidParameterError
from smith_charts.logging_config import get_logger

SMALL = dict(figure_size=2.0, default_dpi=50)


def test_create_smith_chart_saves_file(tmp_path):
    output = tmp_path / "nested" / "smith.png"
    saved = create_smith_chart(output_path=output, config=Config(**SMALL))
    assert saved == str(output)
    assert output.exists()


def test_create_smith_chart_interactive():
    fig, ax = create_smith_chart(config=Config(real_line_values=[1], **SMALL))
    try:
        assert len(ax.patches) == 1 + 6 + 6 + 2
    finally:
        plt.close(fig)


def test_render_sequence_reuses_one_chart(tmp_path):
    frames = render_sequence(DEMO_STAGES, tmp_path, prefix="demo", config=Config(**SMALL))
    assert [f.rsplit("/", 1)[-1] for f in frames] == ["demo_000.png", "demo_001.png", "demo_002.png"]
    for frame in frames:
        assert (tmp_path / frame.rsplit("/", 1)[-1]).exists()


def test_apply_stage(surface):
    chart = SmithChart(surface)
    apply_stage(chart, DEMO_STAGES[1])
    assert chart.config.real_line_values == [0.1, 0.2, 0.5, 0.75, 1, 2, 5, 10]
    assert chart.config.imag_line_color == "purple"
    chart.update()
    assert chart.rendered_counts() == {"real": 8, "imag_positive": 10, "imag_negative": 10}

    apply_stage(chart, DEMO_STAGES[2])
    chart.update()
    assert chart.rendered_counts() == {"real": 4, "imag_positive": 4, "imag_negative": 4}


def test_apply_stage_unknown_key(surface):
    chart = SmithChart(surface)
    with pytest.raises(InvalidParameterError):
        apply_stage(chart, {"zoom": 2})


def test_cli_render(tmp_path):
    output = tmp_path / "cli.png"
    code = main([
        "render", "--output", str(output),
        "--real", "0.5", "1", "--imag", "1",
        "--real-color", "orange", "--margin", "0.1", "--dpi", "50", "--silent"
    ])
    assert code == 0
    assert output.exists()


def test_cli_render_with_config_file(tmp_path):
    config_path = tmp_path / "smith.yaml"
    Config(real_line_values=[2], **SMALL).save_to_file(config_path)
    output = tmp_path / "from_config.svg"
    assert main(["render", "--config", str(config_path), "--output", str(output), "-q"]) == 0
    assert output.exists()


def test_cli_rejects_non_positive_values(tmp_path):
    with pytest.raises(SystemExit):
        main(["render", "--output", str(tmp_path / "x.png"), "--real", "-1"])


def test_cli_reports_bad_config(tmp_path, capsys):
    code = main(["render", "--config", str(tmp_path / "missing.yaml"), "--output", str(tmp_path / "x.png")])
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_rejects_negative_margin(tmp_path):
    assert main(["render", "--output", str(tmp_path / "x.png"), "--margin", "-0.5", "--silent"]) == 1


def test_cli_demo(tmp_path):
    out = tmp_path / "frames"
    code = main(["demo", "--output-dir", str(out), "--dpi", "50", "--silent"])
    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["smith_000.png", "smith_001.png", "smith_002.png"]


def test_cli_without_command_prints_help():
    assert main([]) == 1


def test_module_loggers_inherit_package_level():
    from smith_charts import api
    from smith_charts.calculations import geometry
    from smith_charts.rendering import chart, join, mpl_surface

    for module in (api, geometry, chart, join, mpl_surface):
        assert module.logger is get_logger(module.__name__)
        assert module.logger.name.startswith("smith_charts.")
        assert module.logger.getEffectiveLevel() == logging.getLogger("smith_charts").level
