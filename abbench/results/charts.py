"""Chart generation for benchmark results."""

import logging
from datetime import datetime
from typing import Optional

import matplotlib.pyplot as plt

from ..core.models import ResultTable

logger = logging.getLogger(__name__)

MARKERS = ("o", "s", "^", "D", "v", "P")


def generate_chart(
    table: ResultTable,
    output_path: Optional[str] = None,
    show: bool = False,
    title: str = "Throughput vs Concurrency",
) -> Optional[str]:
    """
    Plot each tool's throughput against concurrency.

    Args:
        table: Completed sweep results
        output_path: Path to save the chart (auto-generated if None)
        show: Whether to display the chart
        title: Chart title

    Returns:
        Path to saved chart file, or None if there was nothing to plot
    """
    if not table.concurrencies:
        logger.warning("No results to chart.")
        return None

    x_values = list(table.concurrencies)

    fig, ax = plt.subplots(figsize=(10, 6))
    fig.suptitle(title, fontsize=14, fontweight="bold")

    for i, name in enumerate(table.tools):
        ax.plot(
            x_values,
            list(table.row(name)),
            marker=MARKERS[i % len(MARKERS)],
            linewidth=2,
            markersize=6,
            label=name,
        )

    ax.set_xlabel("Concurrency")
    ax.set_ylabel("Throughput (requests/second)")
    ax.set_ylim(bottom=0)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        saved_path = output_path
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        saved_path = f"throughput_{timestamp}.png"

    fig.savefig(saved_path, dpi=150, bbox_inches="tight")
    logger.info(f"Chart saved as: {saved_path}")

    if show:
        plt.show()
    plt.close(fig)

    return saved_path
