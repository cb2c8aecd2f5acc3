# wave_based_method/formula.py
"""
Closed-form equations of the coupled room / plate Wave-Based Method model.

Equation numbers in the docstrings follow the thesis the model is taken from.
Room modes (m, n) are 0-based, plate modes (p, q) are 1-based and stored at
[p - 1][q - 1]. Every function is pure and returns a freshly allocated array.
"""
import math
from enum import Enum

import numpy as np

from . import complex_matrix
from .defaults import QUADRATURE_ORDER
from .errors import InvalidOperation
from .quadrature import integrate_2d

# Clamped / free 板的振型尚未实现，统一返回 0
UNIMPLEMENTED_MODE_SHAPE = 0.0


def acoustic_wave_number(room, f, c):
    """
    Formula 2.26. Complex wavenumber, damped by the reverberation time for the
    source and receiving rooms.
    """
    ka = 2 * math.pi * f / c
    if room.is_source or room.is_receiving:
        return ka * complex(1.0, -2.2 / (2 * f * room.T))
    return complex(ka, 0.0)


def plate_bending_stiffness(E, h, v):
    """Formula 2.31"""
    return E * h ** 3 / (12 - 12 * v ** 2)


def acoustic_wave_expansion(room, f, c, M, N):
    """
    Formula 2.36. kz[m][n] = sqrt(ka^2 - (m pi / Lx)^2 - (n pi / Ly)^2), principal branch.
    """
    ka = acoustic_wave_number(room, f, c)
    kz = complex_matrix.create_2d(M, N)
    m = np.arange(M)[:, None]
    n = np.arange(N)[None, :]
    kz[:] = np.sqrt(ka ** 2 - (m * np.pi / room.Lx) ** 2 - (n * np.pi / room.Ly) ** 2)
    return kz


def phi_room(room, m, n, x, y):
    """Formula 2.35. Rigid-wall room eigenfunction."""
    return np.cos(m * np.pi * x / room.Lx) * np.cos(n * np.pi * y / room.Ly)


def phi_plate_simply_supported(plate, p, q, x, y):
    """Formula 2.55"""
    return np.sin(p * np.pi * x / plate.Lx) * np.sin(q * np.pi * y / plate.Ly)


def _unimplemented_mode_shape(x, y):
    shape = np.broadcast(x, y).shape
    if shape == ():
        return UNIMPLEMENTED_MODE_SHAPE
    return np.full(shape, UNIMPLEMENTED_MODE_SHAPE)


def phi_plate_clamped(plate, p, q, x, y):
    """Formula 2.56. Not implemented, always zero."""
    return _unimplemented_mode_shape(x, y)


def phi_plate_free(plate, p, q, x, y):
    """Formula 2.62 and 2.63. Not implemented, always zero."""
    return _unimplemented_mode_shape(x, y)


class PlateBoundaryCondition(Enum):
    SIMPLY_SUPPORTED = "simply_supported"
    CLAMPED = "clamped"
    FREE = "free"

    @property
    def mode_shape(self):
        return {
            PlateBoundaryCondition.SIMPLY_SUPPORTED: phi_plate_simply_supported,
            PlateBoundaryCondition.CLAMPED: phi_plate_clamped,
            PlateBoundaryCondition.FREE: phi_plate_free,
        }[self]

    @property
    def implemented(self):
        return self is PlateBoundaryCondition.SIMPLY_SUPPORTED


def source_projection(room, M, N):
    """
    Formula 2.74 (F). Room mode shapes evaluated at the source point.
    """
    if not room.is_source:
        raise InvalidOperation("F does not apply to non-source room.")
    result = complex_matrix.create_2d(M, N)
    for m in range(M):
        for n in range(N):
            result[m, n] = phi_room(room, m, n, room.Xs, room.Ys)
    return result


def boundary_reflection_coefficient(room, f, c, M, N, sign):
    """exp(i * sign * kz * Lz), written out as cos + i sin."""
    kz = acoustic_wave_expansion(room, f, c, M, N)
    t = sign * kz * room.Lz
    return np.cos(t) + 1j * np.sin(t)


def compute_c1(room, f, c, M, N):
    """Formula 2.84"""
    return boundary_reflection_coefficient(room, f, c, M, N, -1.0)


def compute_c2(room, f, c, M, N):
    """Formula 2.85"""
    return boundary_reflection_coefficient(room, f, c, M, N, 1.0)


def norms_of_room_wave_functions(room, M, N, order=QUADRATURE_ORDER):
    """
    Formula 2.86. Integral of phi_room^2 over the room cross-section.
    """
    result = complex_matrix.create_2d(M, N)
    for m in range(M):
        for n in range(N):
            result[m, n] = integrate_2d(
                lambda x, y: phi_room(room, m, n, x, y) ** 2,
                0.0, room.Lx, 0.0, room.Ly, order)
    return result


def plate_room_projection_coefficients(plate, room, M, N, P, Q, order=QUADRATURE_ORDER):
    """
    Formula 2.87. Overlap of room mode (m, n) and simply supported plate mode
    (p, q) over the plate surface.

    Returns:
        M x N x P x Q tensor
    """
    result = complex_matrix.create_4d(M, N, P, Q)
    for m in range(M):
        for n in range(N):
            for p in range(1, P + 1):
                for q in range(1, Q + 1):
                    # 板局部坐标 -> 房间坐标
                    result[m, n, p - 1, q - 1] = integrate_2d(
                        lambda x, y: phi_room(room, m, n, x + plate.delta_x, y + plate.delta_y)
                        * phi_plate_simply_supported(plate, p, q, x, y),
                        0.0, plate.Lx, 0.0, plate.Ly, order)
    return result


def simply_supported_plate_eigenfrequencies(plate, P, Q):
    """Formula 2.91"""
    wp = complex_matrix.create_2d(P, Q)
    multiplier = math.sqrt(math.pi ** 4 * plate.B / (plate.h * plate.rho))
    for p in range(1, P + 1):
        for q in range(1, Q + 1):
            wp[p - 1, q - 1] = multiplier * ((p / plate.Lx) ** 2 + (q / plate.Ly) ** 2) ** 2
    return wp


def compute_c3(room, f, c, rho_air, M, N):
    """
    Formula 2.96 (source room) and 2.98 (intermediate room). Not defined for
    the receiving room.
    """
    if room.is_receiving:
        raise InvalidOperation("Receiving room does not need C3")

    kz = acoustic_wave_expansion(room, f, c, M, N)
    norms = norms_of_room_wave_functions(room, M, N)
    if room.is_source:
        # Formula 2.96
        F = source_projection(room, M, N)
        t = kz * abs(room.Zs - room.Lz)
        first_term = np.cos(t) + 1j * np.sin(t)
        second_term = 2 * math.pi * f * rho_air / (kz * norms)
        return 0.5 * first_term * second_term * F

    # Formula 2.98
    first_term = -1.0 * (2 * math.pi * f) ** 2 / (kz * norms)
    second_term = 1.0 / np.sin(kz * room.Lz)
    return first_term * second_term


def norms_of_plate_modes(plate, P, Q, mode_shape=PlateBoundaryCondition.SIMPLY_SUPPORTED,
                         order=QUADRATURE_ORDER):
    """
    Formula 2.102. Integral of the squared plate mode shape over the plate.

    Args:
        mode_shape: a PlateBoundaryCondition, or any callable (plate, p, q, x, y) -> real.
    """
    if isinstance(mode_shape, PlateBoundaryCondition):
        mode_shape = mode_shape.mode_shape

    result = complex_matrix.create_2d(P, Q)
    for p in range(1, P + 1):
        for q in range(1, Q + 1):
            result[p - 1, q - 1] = integrate_2d(
                lambda x, y: mode_shape(plate, p, q, x, y) ** 2,
                0.0, plate.Lx, 0.0, plate.Ly, order)
    return result
