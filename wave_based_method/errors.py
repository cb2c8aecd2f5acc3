# wave_based_method/errors.py


class WaveBasedMethodError(Exception):
    """所有 WBM 计算错误的基类"""


class InvalidDimension(WaveBasedMethodError, ValueError):
    """Requested tensor extent is not a positive integer."""


class ShapeMismatch(WaveBasedMethodError, ValueError):
    """Tensor is ragged (rows of different length) or has the wrong rank."""


class NonConformable(WaveBasedMethodError, ValueError):
    """Operand shapes do not fit together for a product or contraction."""


class InvalidOperation(WaveBasedMethodError):
    """Formula called for a room role it does not apply to."""
