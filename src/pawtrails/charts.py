"""Elevation profile chart generation."""

import io

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from pawtrails.distance import distance_miles
from pawtrails.models import GeoSample


def profile_data(samples: list[GeoSample]) -> tuple[list[float], list[float]]:
    """Cumulative distance (miles) and elevation for elevation-bearing samples."""
    distances = []
    elevations = []
    cum_dist = 0.0
    for i, sample in enumerate(samples):
        if i > 0:
            prev = samples[i - 1]
            cum_dist += distance_miles(prev.latitude, prev.longitude, sample.latitude, sample.longitude)
        if sample.elevation is not None:
            distances.append(cum_dist)
            elevations.append(sample.elevation)
    return distances, elevations


def set_fixed_margins(fig, fig_width: float, fig_height: float) -> None:
    """Set fixed margins in inches so the plot area does not depend on labels."""
    left_margin_in = 0.7
    right_margin_in = 0.3
    bottom_margin_in = 0.55
    top_margin_in = 0.35

    fig.subplots_adjust(
        left=left_margin_in / fig_width,
        right=1 - right_margin_in / fig_width,
        bottom=bottom_margin_in / fig_height,
        top=1 - top_margin_in / fig_height,
    )


def generate_elevation_profile(samples: list[GeoSample], aspect_ratio: float = 3.5) -> bytes:
    """Render elevation against distance.

    Args:
        samples: Recorded samples in arrival order
        aspect_ratio: Width/height ratio

    Returns PNG image as bytes.
    """
    distances, elevations = profile_data(samples)
    if len(elevations) < 2:
        raise ValueError("Need at least 2 samples with elevation to draw a profile")

    fig_height = 4
    fig_width = fig_height * aspect_ratio
    fig, ax = plt.subplots(figsize=(fig_width, fig_height), facecolor='white')

    floor = min(elevations)
    span = max(elevations) - floor
    pad = max(span * 0.1, 10)
    ax.fill_between(distances, floor - pad, elevations, color='#6ee7b7', alpha=0.6, linewidth=0)
    ax.plot(distances, elevations, color='#047857', linewidth=1.0)

    ax.set_xlim(0, distances[-1] if distances[-1] > 0 else 1)
    ax.set_ylim(floor - pad, max(elevations) + pad)
    ax.set_xlabel('Distance (mi)', fontsize=10)
    ax.set_ylabel('Elevation (ft)', fontsize=10)
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.grid(axis='y', alpha=0.3, linestyle='-', linewidth=0.5)

    set_fixed_margins(fig, fig_width, fig_height)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=100, facecolor='white', edgecolor='none')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()
