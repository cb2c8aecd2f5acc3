import os
if os.environ.get("WBM_FORCE_SINGLE_THREAD", "True") == "True":
    os.environ["OMP_NUM_THREADS"] = "1"
    os.environ["MKL_NUM_THREADS"] = "1"
    os.environ["OPENBLAS_NUM_THREADS"] = "1"
    os.environ["VECLIB_MAXIMUM_THREADS"] = "1"
    os.environ["NUMEXPR_NUM_THREADS"] = "1"

# wave_based_method/__init__.py
from .simulation import WaveBasedSimulator, reference_scenario

# 常用的配置，方便外部修改
from .defaults import PHYSICS_PARAMS, MODE_CONFIG

from .geometry import Room, Plate, Scenario, RoomRole
from .errors import (
    WaveBasedMethodError, InvalidDimension, ShapeMismatch, NonConformable, InvalidOperation
)
from .logging_config import setup_logging

__all__ = ['WaveBasedSimulator', 'reference_scenario', 'PHYSICS_PARAMS', 'MODE_CONFIG',
           'Room', 'Plate', 'Scenario', 'RoomRole',
           'WaveBasedMethodError', 'InvalidDimension', 'ShapeMismatch', 'NonConformable',
           'InvalidOperation', 'setup_logging']
