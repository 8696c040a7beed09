"""Plotly 24-hour dial renderer.

The day is laid out clockwise with midnight at the top. The night (Maghrib to
Sunrise) is shaded, and every event is a labelled marker on the rim.
"""

import numpy as np
import plotly.graph_objects as go

from prayerly.i18n import event_name
from prayerly.models import DaySchedule, EventKind, TimeOfDay

_BG = "#0d1b35"
_RIM_COLOR = "#c9a96e"
_NIGHT_COLOR = "rgba(126, 200, 227, 0.18)"
_MARKER_COLOR = "#e8d5a3"


def clock_degrees(time: TimeOfDay) -> float:
    """Dial angle of a clock time: 15° per hour, clockwise from midnight."""
    return (time.hour + time.minute / 60 + time.second / 3600) * 15.0


def night_arc(schedule_day: DaySchedule, steps: int = 64) -> np.ndarray:
    """Dial angles from Maghrib forward to Sunrise, wrapping past midnight."""
    schedule = schedule_day.schedule
    start = clock_degrees(schedule[EventKind.MAGHRIB])
    end = clock_degrees(schedule[EventKind.SUNRISE])
    if end <= start:
        end += 360.0
    return np.linspace(start, end, steps) % 360.0


def render_plotly_chart(day_schedule: DaySchedule, lang: str = "en") -> go.Figure:
    """Render a DaySchedule as an interactive Plotly dial.

    Args:
        day_schedule: Fully computed schedule.
        lang: Language of the event labels.

    Returns:
        Plotly Figure object.
    """
    arc = night_arc(day_schedule)
    night_trace = go.Barpolar(
        r=np.ones_like(arc),
        theta=arc,
        width=np.full_like(arc, 360.0 / len(arc) * 1.2),
        marker=dict(color=_NIGHT_COLOR, line=dict(width=0)),
        hoverinfo="skip",
        name="night",
    )

    events = list(day_schedule.schedule.items())
    labels = [event_name(kind, lang) for kind, _ in events]
    event_trace = go.Scatterpolar(
        r=[0.9] * len(events),
        theta=[clock_degrees(t) for _, t in events],
        mode="markers+text",
        text=labels,
        textposition="middle center",
        textfont=dict(color=_MARKER_COLOR, size=11),
        marker=dict(size=8, color=_MARKER_COLOR, opacity=0.9),
        customdata=[t.display for _, t in events],
        hovertemplate="%{text} %{customdata}<extra></extra>",
        name="events",
    )

    fig = go.Figure(data=[night_trace, event_trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=20, r=20, t=20, b=20),
        width=600,
        height=600,
        polar=dict(
            bgcolor=_BG,
            radialaxis=dict(visible=False, range=[0, 1.05]),
            angularaxis=dict(
                rotation=90,
                direction="clockwise",
                tickmode="array",
                tickvals=[h * 15 for h in range(0, 24, 3)],
                ticktext=[f"{h:02d}:00" for h in range(0, 24, 3)],
                tickfont=dict(color=_RIM_COLOR),
                linecolor=_RIM_COLOR,
                gridcolor="rgba(201,169,110,0.15)",
            ),
        ),
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig
