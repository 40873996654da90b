import matplotlib.pyplot as plt

from qcd_lattice.diagnostics import format_sweep, plot_action_history, report_sweep


def test_format_sweep():
    assert format_sweep(1, 0.0) == "Sweep 1 | Action = 0.000000"
    assert format_sweep(12, 3.14159265) == "Sweep 12 | Action = 3.141593"
    assert format_sweep(3, -0.5) == "Sweep 3 | Action = -0.500000"


def test_report_sweep_prints(capsys):
    report_sweep(2, 1.5)
    assert capsys.readouterr().out == "Sweep 2 | Action = 1.500000\n"


def test_plot_action_history():
    fig = plot_action_history([3.0, 2.0, 1.5], beta=5.7)
    ax = fig.axes[0]
    line = ax.get_lines()[0]
    assert list(line.get_xdata()) == [1, 2, 3]
    assert list(line.get_ydata()) == [3.0, 2.0, 1.5]
    assert "5.7" in ax.get_title()
    plt.close(fig)
