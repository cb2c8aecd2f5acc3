# wave_based_method/complex_matrix.py
import numbers

import numpy as np

from .errors import InvalidDimension, NonConformable, ShapeMismatch


def _create(*extents):
    for extent in extents:
        if not isinstance(extent, numbers.Integral) or extent <= 0:
            raise InvalidDimension(f"Tensor extents must be positive integers, got {extents}")
    return np.zeros(extents, dtype=complex)


def create_2d(X, Y):
    return _create(X, Y)


def create_3d(X, Y, Z):
    return _create(X, Y, Z)


def create_4d(X1, X2, X3, X4):
    return _create(X1, X2, X3, X4)


def as_tensor(data):
    """Any nested sequence or ndarray as a complex ndarray. Ragged input raises ShapeMismatch."""
    try:
        return np.asarray(data, dtype=complex)
    except ValueError:
        raise ShapeMismatch("Tensor is ragged (cells of different length)") from None


def as_matrix(data):
    """
    把嵌套列表 (或 ndarray) 转成二维复数矩阵。行长度不一致时报 ShapeMismatch。
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise ShapeMismatch(f"Expected a 2D tensor, got {data.ndim} axes")
        return data.astype(complex)

    try:
        rows = [list(row) for row in data]
    except TypeError:
        raise ShapeMismatch("Expected a sequence of rows") from None
    if not rows:
        raise ShapeMismatch("Matrix has no rows")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ShapeMismatch(f"Row {i} has {len(row)} cells, expected {width}")
    return as_tensor(rows).reshape(len(rows), width)


def copy(matrix):
    """Deep copy of a rectangular 2D tensor."""
    return as_matrix(matrix).copy()


def matrix_product(matrixA, matrixB):
    """
    2D x 2D matrix product.

    Each result cell is accumulated from complex zero over ascending k, the same
    order as a plain i/j/k triple loop, so results are reproducible bit for bit.
    """
    matrixA = as_matrix(matrixA)
    matrixB = as_matrix(matrixB)
    aRows, aCols = matrixA.shape
    bRows, bCols = matrixB.shape
    if aCols != bRows:
        raise NonConformable(f"Non-conformable matrices: {matrixA.shape} x {matrixB.shape}")

    result = create_2d(aRows, bCols)
    for k in range(aCols):
        result += np.outer(matrixA[:, k], matrixB[k, :])
    return result


def contract(matrixA, matrixB):
    """
    Contract the first two axes of a rank-4 tensor against a 2D tensor.

    Args:
        matrixA: X1 x X2
        matrixB: Y1 x Y2 x Y3 x Y4, with (Y1, Y2) == (X1, X2)

    Returns:
        Y3 x Y4 tensor, result[y3][y4] = sum over y1, y2 of A[y1][y2] * B[y1][y2][y3][y4]
    """
    matrixA = as_matrix(matrixA)
    matrixB = as_tensor(matrixB)
    if matrixB.ndim != 4 or matrixA.shape != matrixB.shape[:2]:
        raise NonConformable(f"Non-conformable tensors: {matrixA.shape} x {matrixB.shape}")

    Y1, Y2, Y3, Y4 = matrixB.shape
    result = create_2d(Y3, Y4)
    for y1 in range(Y1):
        for y2 in range(Y2):
            result += matrixA[y1, y2] * matrixB[y1, y2]
    return result


def multiply(matrixA, matrixB):
    """A (2D) times B, where B is either a 2D matrix or a rank-4 tensor."""
    matrixB = as_tensor(matrixB)
    ndim = matrixB.ndim
    if ndim == 2:
        return matrix_product(matrixA, matrixB)
    if ndim == 4:
        return contract(matrixA, matrixB)
    raise NonConformable(f"Cannot multiply a 2D tensor by a tensor with {ndim} axes")


def _format_cell(value):
    value = complex(value)
    return f"({value.real:.3f}{value.imag:+.3f}j)"


def format_matrix(matrix):
    lines = []
    for row in matrix:
        lines.append(" ".join(_format_cell(cell).rjust(8) for cell in row) + "\n")
    return "".join(lines)
