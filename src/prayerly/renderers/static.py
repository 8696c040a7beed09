"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from prayerly.i18n import event_name  # noqa: E402
from prayerly.models import DaySchedule  # noqa: E402
from prayerly.renderers.plotly_2d import clock_degrees, night_arc  # noqa: E402

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(day_schedule: DaySchedule, chart_size: int = 8) -> Figure:
    """Render a DaySchedule as a static 24-hour dial.

    Args:
        day_schedule: Fully computed schedule.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig = plt.figure(figsize=(chart_size, chart_size))
    ax = fig.add_subplot(projection="polar")
    fig.patch.set_facecolor("#0d1b35")
    ax.set_facecolor("#0d1b35")
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)

    arc = np.radians(night_arc(day_schedule))
    ax.fill_between(arc, 0, 1, color="#7ec8e3", alpha=0.18, linewidth=0)

    for kind, time in day_schedule.schedule.items():
        theta = np.radians(clock_degrees(time))
        ax.plot([theta], [0.9], marker="o", color="#e8d5a3", markersize=5)
        ax.annotate(
            f"{event_name(kind)}\n{time.display}",
            xy=(theta, 0.9),
            xytext=(theta, 0.72),
            color="#e8d5a3",
            fontsize=8,
            ha="center",
            va="center",
        )

    ax.set_xticks(np.radians([h * 15 for h in range(0, 24, 3)]))
    ax.set_xticklabels([f"{h:02d}:00" for h in range(0, 24, 3)], color="#c9a96e")
    ax.set_yticks([])
    ax.set_ylim(0, 1.05)
    ax.spines["polar"].set_color("#c9a96e")

    return fig


def save_static_chart(day_schedule: DaySchedule, output_path: Path | None = None) -> Path:
    """Save a DaySchedule as a PNG file.

    Args:
        day_schedule: Fully computed schedule.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        ctx = day_schedule.context
        filename = f"{ctx.address_display}__{ctx.day:%Y_%m_%d}.png".replace(" ", "_")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(day_schedule)
    fig.savefig(output_path, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
