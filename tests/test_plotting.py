import matplotlib

matplotlib.use("Agg")

from mg1_queue import SimulationState  # noqa: E402
from mg1_queue.visualization import plot_trajectory  # noqa: E402


def test_plot_trajectory_saves(tmp_path):
    states = [
        SimulationState(0.0, 0, None),
        SimulationState(5.0, 0, 0),
        SimulationState(6.0, 0, 1),
        SimulationState(8.0, 1, 0),
    ]
    fig = plot_trajectory(states)
    out = tmp_path / "queue.png"
    fig.savefig(out)
    assert out.exists()
    assert fig.axes[0].get_ylabel() == 'Customers Waiting'


def test_plot_trajectory_draws_raw_states_at_equal_clocks():
    states = [
        SimulationState(0.0, 0, None),
        SimulationState(5.0, 0, 0),
        SimulationState(5.0, 0, 2),
        SimulationState(8.0, 1, 3),
    ]
    fig = plot_trajectory(states)
    ydata = fig.axes[0].lines[0].get_ydata()
    assert len(ydata) == 4
    assert sorted(set(float(y) for y in ydata)) == [0.0, 2.0, 3.0]
