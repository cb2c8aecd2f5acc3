# wave_based_method/geometry.py
from dataclasses import dataclass, field
from enum import Enum

from .formula import plate_bending_stiffness


class RoomRole(Enum):
    SOURCE = "source"
    RECEIVING = "receiving"
    INTERMEDIATE = "intermediate"


@dataclass(frozen=True)
class Room:
    """
    矩形房间 (长方体)。声源坐标 Xs, Ys, Zs 只对声源房间有意义。
    """
    Lx: float
    Ly: float
    Lz: float
    T: float = 0.0            # 混响时间 (s)
    is_source: bool = False
    is_receiving: bool = False
    Xs: float = 0.0
    Ys: float = 0.0
    Zs: float = 0.0

    def __post_init__(self):
        if min(self.Lx, self.Ly, self.Lz) <= 0:
            raise ValueError(f"Room dimensions must be positive, got ({self.Lx}, {self.Ly}, {self.Lz})")
        if self.T < 0:
            raise ValueError(f"Reverberation time must be non-negative, got {self.T}")
        if (self.is_source or self.is_receiving) and self.T == 0:
            # 声源/接收房间的阻尼波数要除以 T
            raise ValueError("Source and receiving rooms need a positive reverberation time")
        if self.is_source and self.is_receiving:
            raise ValueError("A room cannot be both the source and the receiving room")
        if self.is_source:
            inside = (0 < self.Xs < self.Lx and 0 < self.Ys < self.Ly and 0 < self.Zs < self.Lz)
            if not inside:
                raise ValueError(
                    f"Source point ({self.Xs}, {self.Ys}, {self.Zs}) is outside the room")

    @property
    def role(self):
        if self.is_source:
            return RoomRole.SOURCE
        if self.is_receiving:
            return RoomRole.RECEIVING
        return RoomRole.INTERMEDIATE


@dataclass(frozen=True)
class Plate:
    Lx: float
    Ly: float
    rho: float                # density
    h: float                  # thickness
    B: float                  # bending stiffness
    delta_x: float = 0.0      # 板原点在相邻房间截面中的偏移
    delta_y: float = 0.0

    def __post_init__(self):
        if min(self.Lx, self.Ly) <= 0:
            raise ValueError(f"Plate dimensions must be positive, got ({self.Lx}, {self.Ly})")
        if self.rho <= 0 or self.h <= 0:
            raise ValueError(f"Plate density and thickness must be positive, got rho={self.rho}, h={self.h}")
        if self.B < 0:
            raise ValueError(f"Bending stiffness must be non-negative, got {self.B}")

    @classmethod
    def from_material(cls, Lx, Ly, delta_x, delta_y, rho, h, youngs_modulus, poisson_ratio):
        """由杨氏模量和泊松比计算弯曲刚度 B"""
        B = plate_bending_stiffness(youngs_modulus, h, poisson_ratio)
        return cls(Lx=Lx, Ly=Ly, delta_x=delta_x, delta_y=delta_y, rho=rho, h=h, B=B)


def describe_room(room):
    fields = [
        f"role:{room.role.value}",
        f"Lx:{room.Lx}", f"Ly:{room.Ly}", f"Lz:{room.Lz}",
        f"T:{room.T}",
    ]
    if room.is_source:
        fields += [f"Xs:{room.Xs}", f"Ys:{room.Ys}", f"Zs:{room.Zs}"]
    return "{" + " ".join(fields) + "}"


def describe_plate(plate):
    fields = [
        f"Lx:{plate.Lx}", f"Ly:{plate.Ly}",
        f"delta_x:{plate.delta_x}", f"delta_y:{plate.delta_y}",
        f"rho:{plate.rho}", f"h:{plate.h}", f"B:{plate.B}",
    ]
    return "{" + " ".join(fields) + "}"


@dataclass
class Scenario:
    """一组房间和板，供 WaveBasedSimulator 使用"""
    rooms: list = field(default_factory=list)
    plates: list = field(default_factory=list)

    def add(self, item):
        if isinstance(item, Room):
            self.rooms.append(item)
        elif isinstance(item, Plate):
            self.plates.append(item)
        else:
            raise TypeError(f"Scenario accepts Room or Plate, got {type(item).__name__}")
        return self

    def room_with_role(self, role):
        """Return the first room with the given RoomRole, or None."""
        for room in self.rooms:
            if room.role is role:
                return room
        return None

    def __str__(self):
        lines = ["Scenario:", " rooms = "]
        lines += [describe_room(room) for room in self.rooms]
        lines += ["", " plates = "]
        lines += [describe_plate(plate) for plate in self.plates]
        return "\n".join(lines) + "\n"
