"""
Cross-Entropy Math
==================
Closed-form helpers behind the loss curve, its reference lines and the
cross-hair readout.

The plot shows loss on the x axis and probability on the y axis, so the
curve is drawn as p = exp(-x), the inverse of L = -ln(p).
"""
from __future__ import annotations

from dataclasses import dataclass
from math import exp, log

import numpy as np
from numpy import typing as npt

from losscurve.config import (
    CURVE_STEP,
    LOSS_RANGE,
    MIN_CLASSES,
    TOOLTIP_FONT_SIZE,
)


def clamp_loss(x: float, lower: float = LOSS_RANGE[0], upper: float = LOSS_RANGE[1]) -> float:
    """Clamp a raw loss value into [lower, upper]. Infinite inputs land on the bounds."""
    return min(max(float(x), lower), upper)


def loss_to_probability(x: float) -> float:
    """Target probability at loss x: p = exp(-x)."""
    return exp(-x)


def probability_to_loss(p: float) -> float:
    """
    Cross-entropy loss for target probability p: L = -ln(p).

    Raises:
        ValueError: If p is outside (0, 1].
    """
    if not 0.0 < p <= 1.0:
        raise ValueError(f"Probability must lie in (0, 1], got {p}.")
    return -log(p)


def _check_num_classes(n: int) -> None:
    if n < MIN_CLASSES:
        raise ValueError(f"Number of classes must be at least {MIN_CLASSES}, got {n}.")


def random_baseline_loss(n: int) -> float:
    """
    Loss of a uniform random guess over n classes: -ln(1/n) = ln(n).

    Raises:
        ValueError: If n < 2.
    """
    _check_num_classes(n)
    return log(n)


def others_average(p: float, n: int) -> float:
    """
    Average probability left for each of the other n - 1 classes,
    assuming the remainder 1 - p is spread uniformly.

    Raises:
        ValueError: If n < 2.
    """
    _check_num_classes(n)
    return (1.0 - p) / (n - 1)


def sample_curve(
    lower: float = LOSS_RANGE[0],
    upper: float = LOSS_RANGE[1],
    step: float = CURVE_STEP,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Sample p = exp(-x) over [lower, upper] (both ends included).

    Args:
        lower: First loss value.
        upper: Last loss value.
        step: Approximate spacing between samples.

    Returns:
        Tuple (xs, ps) of equally long 1-D arrays.
    """
    if step <= 0.0:
        raise ValueError(f"Sampling step must be positive, got {step}.")
    n_points = int(round((upper - lower) / step)) + 1
    xs = np.linspace(lower, upper, max(n_points, 2))
    return xs, np.exp(-xs)


@dataclass(frozen=True)
class CrossHairReadout:
    """Values shown for one pointer position on the curve."""
    loss: float
    probability: float
    others_average: float
    num_classes: int


def compute_readout(raw_x: float, n: int) -> CrossHairReadout:
    """
    Map a raw loss coordinate to the point on the curve under the pointer.

    Args:
        raw_x: Loss coordinate of the pointer, possibly outside the visible range.
        n: Current number of classes.

    Returns:
        The clamped loss, its target probability and the others average.
    """
    x = clamp_loss(raw_x)
    p = loss_to_probability(x)
    return CrossHairReadout(
        loss=x,
        probability=p,
        others_average=others_average(p, n),
        num_classes=n,
    )


def format_readout(readout: CrossHairReadout) -> str:
    """Rich-text tooltip body, every value to 4 decimal places."""
    return (
        f"<div style='font-size:{TOOLTIP_FONT_SIZE};'>"
        f"<b>Loss:</b> {readout.loss:.4f}<br>"
        f"<b>Target Prob:</b> {readout.probability:.4f}<br>"
        f"<b>Others Avg Prob:</b> {readout.others_average:.4f}</div>"
    )
