# wave_based_method/quadrature.py
import numpy as np
from scipy.special import roots_legendre

# 节点/权重缓存
# Key: order
# Value: (nodes, weights) on [-1, 1]
_RULE_CACHE = {}


def gauss_legendre(order):
    """Gauss-Legendre nodes and weights on [-1, 1] for the given number of points."""
    if order < 1:
        raise ValueError(f"Unsupported quadrature order: {order}. 'order' must be >= 1.")
    if order not in _RULE_CACHE:
        nodes, weights = roots_legendre(order)
        _RULE_CACHE[order] = (nodes, weights)
    return _RULE_CACHE[order]


def integrate_2d(func, x0, x1, y0, y1, order=5):
    """
    Tensor-product Gauss-Legendre approximation of the double integral of
    func over [x0, x1] x [y0, y1].

    Args:
        func: f(x, y) -> real, evaluated at every node pair (x along axis 0,
            y along axis 1). Plain scalar functions such as math.sin work.
        x0, x1, y0, y1: Rectangle bounds.
        order: Number of nodes per axis.

    Returns:
        float
    """
    nodes, weights = gauss_legendre(order)

    # 从 [-1, 1] 映射到积分区间
    half_x = 0.5 * (x1 - x0)
    half_y = 0.5 * (y1 - y0)
    xs = half_x * nodes + 0.5 * (x1 + x0)
    ys = half_y * nodes + 0.5 * (y1 + y0)

    # 逐节点求值
    values = np.vectorize(func, otypes=[float])(xs[:, None], ys[None, :])
    return float(half_x * half_y * (weights @ values @ weights))
