"""Matplotlib plots of a finished run."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from shopsimulator.roster import self_checkouts

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from shopsimulator.summary import SimulationResult


def plot_queue_lengths(result: SimulationResult, path: str | Path | None = None) -> Figure:
    """Step plot of every server's queue length over simulated time.

    Self-checkout counters share one queue, so only the first counter is
    drawn for them. The figure is saved as a PNG when ``path`` is given.
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    df = result.to_dataframe()
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    humans = [s for s in result.roster if not s.is_self_checkout]
    counters = self_checkouts(result.roster)

    for server in humans:
        ax1.step(df["time"], df[f"queue_{server.id}"], where="post", linewidth=2, label=f"Server {server}")
    if counters:
        first = counters[0]
        ax1.step(
            df["time"], df[f"queue_{first.id}"], where="post", linewidth=2, linestyle="--",
            label=f"Self-checkout queue ({len(counters)} counters)",
        )
    ax1.set_ylabel("Queue length")
    ax1.set_title("Queue lengths over time")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    for kind, color in (("serve", "green"), ("wait", "orange"), ("leave", "red")):
        rows = df[df["kind"] == kind]
        ax2.scatter(rows["time"], rows["customer_id"], c=color, label=kind, s=30, alpha=0.7)
    ax2.set_ylabel("Customer")
    ax2.set_xlabel("Time")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    fig.tight_layout()
    if path is not None:
        fig.savefig(path, dpi=150)
    return fig
