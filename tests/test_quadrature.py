import math

import numpy as np
import pytest

from wave_based_method.quadrature import gauss_legendre, integrate_2d


class TestGaussLegendre:

    def test_weights_sum_to_interval_length(self):
        nodes, weights = gauss_legendre(5)
        assert len(nodes) == 5
        assert weights.sum() == pytest.approx(2.0, abs=1e-14)

    def test_rule_is_cached(self):
        assert gauss_legendre(5) is gauss_legendre(5)

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            gauss_legendre(0)


class TestIntegrate2D:

    def test_constant_integrand_gives_area(self):
        area = integrate_2d(lambda x, y: np.ones_like(x * y), 0.0, 5.09, 0.0, 4.12)
        assert area == pytest.approx(5.09 * 4.12, abs=1e-10)

    def test_scalar_integrand(self):
        assert integrate_2d(lambda x, y: 3.0, 0.0, 2.0, 1.0, 2.0) == pytest.approx(6.0)

    def test_polynomial_is_exact(self):
        # x^3 y^2 over [0, 1] x [0, 2] = 1/4 * 8/3
        result = integrate_2d(lambda x, y: x ** 3 * y ** 2, 0.0, 1.0, 0.0, 2.0, order=5)
        assert result == pytest.approx(2.0 / 3.0, rel=1e-12)

    def test_smooth_integrand(self):
        result = integrate_2d(lambda x, y: np.sin(x) * np.cos(y), 0.0, np.pi, 0.0, np.pi / 2, order=5)
        assert result == pytest.approx(2.0, rel=1e-4)

    def test_scalar_math_integrand(self):
        result = integrate_2d(lambda x, y: math.cos(x) * math.cos(y), 0.0, 1.0, 0.0, 1.0, order=5)
        assert result == pytest.approx(math.sin(1.0) ** 2, rel=1e-9)

    def test_returns_float(self):
        assert isinstance(integrate_2d(lambda x, y: x + y, 0.0, 1.0, 0.0, 1.0), float)
