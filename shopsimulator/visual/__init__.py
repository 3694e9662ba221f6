"""Plotting helpers for simulation results.

Usage::

    from shopsimulator.visual import plot_queue_lengths

    result = run_simulation(config)
    plot_queue_lengths(result, "queues.png")
"""

from shopsimulator.visual.plots import plot_queue_lengths

__all__ = ["plot_queue_lengths"]
