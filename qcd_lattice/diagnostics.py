"""
diagnostics.py

Per-sweep output of the Metropolis run and a plot of the action history.
"""
import matplotlib.pyplot as plt
import numpy as np


def format_sweep(sweep, action):
    """Line printed after sweep number `sweep` (1-based)."""
    # adding 0.0 turns -0.0 (beta = 0 with Re Tr P > 3) into 0.0
    return f"Sweep {sweep} | Action = {action + 0.0:.6f}"


def report_sweep(sweep, action):
    print(format_sweep(sweep, action))


def plot_action_history(action_history, beta=None):
    """Plot the Wilson action as a function of sweep number; returns the figure."""
    fig = plt.figure(figsize=(8, 5))
    plt.plot(np.arange(1, len(action_history) + 1), action_history, marker='o', linestyle='-', color='b')
    plt.xlabel('Sweep')
    plt.ylabel('Wilson action S')
    title = 'Action History'
    if beta is not None:
        title += f' (beta = {beta})'
    plt.title(title)
    plt.grid(True)
    plt.tight_layout()
    return fig
