from __future__ import annotations

import math

import numpy as np
import pytest

from losscurve.config import MAX_CLASSES, MIN_CLASSES
from losscurve.model.loss import (
    CrossHairReadout,
    clamp_loss,
    compute_readout,
    format_readout,
    loss_to_probability,
    others_average,
    probability_to_loss,
    random_baseline_loss,
    sample_curve,
)


@pytest.mark.parametrize("n", [2, 3, 10, 1000, MAX_CLASSES])
def test_random_baseline_is_log_n(n: int) -> None:
    x = random_baseline_loss(n)
    assert x == pytest.approx(math.log(n))
    assert x >= math.log(2)


def test_random_baseline_rejects_single_class() -> None:
    with pytest.raises(ValueError):
        random_baseline_loss(1)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (-math.inf, 0.0),
        (-3.0, 0.0),
        (0.0, 0.0),
        (2.5, 2.5),
        (5.0, 5.0),
        (7.2, 5.0),
        (math.inf, 5.0),
    ],
)
def test_clamp_loss_keeps_visible_range(raw: float, expected: float) -> None:
    assert clamp_loss(raw) == expected


def test_probability_stays_within_curve_bounds() -> None:
    for x in np.linspace(0.0, 5.0, 51):
        p = loss_to_probability(float(x))
        assert math.exp(-5.0) <= p <= 1.0


def test_probability_to_loss_inverts_curve() -> None:
    assert probability_to_loss(0.9) == pytest.approx(0.1053605, abs=1e-6)
    assert probability_to_loss(1.0) == 0.0


@pytest.mark.parametrize("p", [0.0, -0.5, 1.5])
def test_probability_to_loss_rejects_out_of_domain(p: float) -> None:
    with pytest.raises(ValueError):
        probability_to_loss(p)


def test_others_average_non_negative() -> None:
    for n in (MIN_CLASSES, 7, MAX_CLASSES):
        for p in (1e-6, 0.25, 0.5, 0.999999):
            assert others_average(p, n) >= 0.0


def test_others_average_rejects_single_class() -> None:
    with pytest.raises(ValueError):
        others_average(0.5, 1)


def test_readout_two_classes_at_zero_loss() -> None:
    readout = compute_readout(0.0, 2)
    assert f"{readout.probability:.4f}" == "1.0000"
    assert f"{readout.others_average:.4f}" == "0.0000"


def test_readout_ten_classes_at_unit_loss() -> None:
    readout = compute_readout(1.0, 10)
    assert f"{readout.probability:.4f}" == "0.3679"
    assert f"{readout.others_average:.4f}" == "0.0702"
    assert readout.num_classes == 10


def test_readout_clamps_before_computing_probability() -> None:
    readout = compute_readout(7.2, 5)
    assert readout.loss == 5.0
    assert readout.probability == pytest.approx(math.exp(-5.0))


def test_format_readout_uses_four_decimals() -> None:
    text = format_readout(CrossHairReadout(loss=1.0, probability=math.exp(-1.0),
                                           others_average=0.07024, num_classes=10))
    assert "<b>Loss:</b> 1.0000" in text
    assert "<b>Target Prob:</b> 0.3679" in text
    assert "<b>Others Avg Prob:</b> 0.0702" in text


def test_sample_curve_covers_both_ends() -> None:
    xs, ps = sample_curve()
    assert xs.shape == ps.shape == (501,)
    assert xs[0] == 0.0 and xs[-1] == pytest.approx(5.0)
    np.testing.assert_allclose(ps, np.exp(-xs))


def test_sample_curve_rejects_non_positive_step() -> None:
    with pytest.raises(ValueError):
        sample_curve(step=0.0)
