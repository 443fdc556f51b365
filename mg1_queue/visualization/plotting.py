"""
Visualization utilities for the queue state series.
"""

from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from ..system import SimulationState


def plot_trajectory(states: Iterable[SimulationState],
                    title: str = "Queue Length Over Time"):
    """Step plot of customers waiting against the simulation clock."""
    states = list(states)
    clock = np.array([s.clock for s in states], dtype=float)
    # Idle server has nobody waiting
    waiting = np.array([0 if s.num_waiting is None else s.num_waiting
                        for s in states], dtype=float)

    sns.set_style("whitegrid")
    fig, ax = plt.subplots(figsize=(12, 5))
    sns.lineplot(x=clock, y=waiting, estimator=None, drawstyle='steps-post', ax=ax)
    ax.set_xlabel('Clock')
    ax.set_ylabel('Customers Waiting')
    ax.set_title(title)
    if len(states):
        ax.set_xlim(0, max(clock[-1], 1e-9))

    return fig
