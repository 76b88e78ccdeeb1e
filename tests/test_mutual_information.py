import math

import numpy as np
import pytest

from histogram_mi.discretization import discretize
from histogram_mi.information_metrics.mutual_information import (
    _safe_mi_contrib,
    mutual_information,
    mutual_information_sklearn,
)
from histogram_mi.information_metrics.probability import (
    joint_probability,
    marginal_probability,
)


def _distributions(x, y):
    return joint_probability(x, y), marginal_probability(x), marginal_probability(y)


class TestSafeContribution:
    def test_zero_probabilities_contribute_nothing(self):
        contrib = _safe_mi_contrib(
            np.array([0.0, 0.5, 0.5]),
            np.array([0.5, 0.0, 0.5]),
            np.array([0.5, 0.5, 0.0]),
        )
        np.testing.assert_array_equal(contrib, [0.0, 0.0, 0.0])
        assert np.all(np.isfinite(contrib))

    def test_positive_term(self):
        contrib = _safe_mi_contrib(np.array([0.5]), np.array([0.5]), np.array([0.5]))
        np.testing.assert_allclose(contrib, [0.5 * math.log(2.0)])


class TestMutualInformation:
    def test_identical_uniform_codes(self):
        x = [1, 2, 3, 4, 5, 1, 2, 3, 4, 5]
        mi = mutual_information(*_distributions(x, x), base=2)
        assert mi == pytest.approx(2.321928094887362, abs=1e-12)

    def test_independent_by_construction(self):
        mi = mutual_information(*_distributions([1, 1, 2, 2, 3, 3], [1, 2, 1, 2, 1, 2]), base=2)
        assert mi == pytest.approx(0.0, abs=1e-12)

    def test_base_conversion(self):
        joint, mx, my = _distributions([0, 1, 0, 1], [0, 1, 0, 1])
        bits = mutual_information(joint, mx, my, base=2)
        nats = mutual_information(joint, mx, my, base=math.e)
        assert bits == pytest.approx(1.0)
        assert nats == pytest.approx(math.log(2.0))

    def test_missing_marginal_key_is_skipped(self):
        """Pairs whose code is absent from a marginal contribute zero."""
        joint = {(0, 0): 0.5, (1, 1): 0.5}
        marginal_x = {0: 0.5}
        marginal_y = {0: 0.5, 1: 0.5}
        mi = mutual_information(joint, marginal_x, marginal_y, base=2)
        assert mi == pytest.approx(0.5)

    def test_empty_joint(self):
        assert mutual_information({}, {}, {}, base=2) == 0.0

    def test_never_negative_for_random_codes(self):
        rng = np.random.default_rng(3)
        for _ in range(20):
            x = rng.integers(0, 4, size=50)
            y = rng.integers(0, 3, size=50)
            assert mutual_information(*_distributions(x, y), base=2) >= 0.0


def test_matches_sklearn_reference():
    rng = np.random.default_rng(123)
    n_samples = 400

    x = rng.normal(size=n_samples)
    y = np.sin(x) + 0.3 * rng.normal(size=n_samples)
    x_codes = discretize(x, 8)
    y_codes = discretize(y, 8)

    for base in (2, math.e, 10):
        ours = mutual_information(*_distributions(x_codes, y_codes), base=base)
        reference = mutual_information_sklearn(x_codes, y_codes, base)
        np.testing.assert_allclose(ours, reference, rtol=1e-10, atol=1e-12)


def test_sklearn_reference_empty_input():
    assert mutual_information_sklearn(np.array([], dtype=int), np.array([], dtype=int), 2) == 0.0
