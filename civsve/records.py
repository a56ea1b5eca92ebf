"""Fixed-size records found inside a Civilization save game (.SVE).

Every record is little-endian and packed. Each class knows its on-disk
size (``SIZE``) and converts between bytes and Python values with
``from_bytes`` and ``to_bytes``. Enumerated fields hold the matching enum
member when the value is known and the plain integer otherwise, so that
any file survives a read and a write unchanged.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import ClassVar, Union

from .enums import (
    CityId,
    CityImprovement,
    PalacePart,
    PalacePartStyle,
    TechID,
    TerrainCategory,
    UnitRole,
    UnitTypeMap,
)

__all__ = [
    "NAME_ENCODING",
    "NOT_BUILT",
    "NO_TRADE_ROUTE",
    "decode_name",
    "encode_name",
    "Coordinates",
    "DiscoveredAdvances",
    "City",
    "UnitType",
    "Unit",
    "Wonders",
    "UnitsLost",
    "Palace",
]

NAME_ENCODING = "latin-1"
NOT_BUILT = 0xFFFF
NO_TRADE_ROUTE = 0xFF

_TECH_FLAG_WORDS = 5
_BITS_PER_WORD = 16
_UNIT_TYPE_COUNT = 28


def decode_name(raw):
    """Return the text of a NUL-terminated fixed-size name field."""
    return bytes(raw).split(b"\x00", 1)[0].decode(NAME_ENCODING)


def encode_name(name, size):
    """Encode *name* into a NUL-padded field of *size* bytes.

    The name must leave room for its terminating NUL.
    """
    encoded = name.encode(NAME_ENCODING)
    if b"\x00" in encoded:
        raise ValueError("name must not contain NUL characters")
    if len(encoded) >= size:
        raise ValueError(f"name {name!r} does not fit a {size}-byte field")
    return encoded.ljust(size, b"\x00")


def _enum(enum_cls: type[IntEnum], value: int):
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _unpack(record_cls, data) -> tuple:
    data = bytes(data)
    if len(data) != record_cls.SIZE:
        raise ValueError(
            f"{record_cls.__name__} needs {record_cls.SIZE} bytes, got {len(data)}"
        )
    return record_cls._STRUCT.unpack(data)


def _pack(layout: struct.Struct, *values) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _fixed(value, size: int, what: str) -> bytes:
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(value)}")
    return value


@dataclass
class Coordinates:
    """A map position."""

    x: int = 0
    y: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<BB")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        return cls(*_unpack(cls, data))

    def to_bytes(self):
        return _pack(self._STRUCT, self.x, self.y)


@dataclass
class DiscoveredAdvances:
    """Bit set of the advances a civilization has discovered.

    Advance ``n`` is bit ``n % 16`` of 16-bit word ``n // 16``.
    """

    flags: list[int] = field(default_factory=lambda: [0] * _TECH_FLAG_WORDS)

    _STRUCT: ClassVar[struct.Struct] = struct.Struct(f"<{_TECH_FLAG_WORDS}H")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        return cls(list(_unpack(cls, data)))

    def to_bytes(self):
        return _pack(self._STRUCT, *self.flags)

    @staticmethod
    def _position(tech) -> tuple[int, int]:
        index = int(tech)
        if not 0 <= index < _TECH_FLAG_WORDS * _BITS_PER_WORD:
            raise ValueError(f"advance id {index} is out of range")
        return divmod(index, _BITS_PER_WORD)

    def has_tech(self, tech):
        """Return whether *tech* is marked as discovered."""
        word, bit = self._position(tech)
        return bool(self.flags[word] >> bit & 1)

    def set_tech(self, tech, discovered=True):
        """Mark *tech* as discovered or not."""
        word, bit = self._position(tech)
        if discovered:
            self.flags[word] |= 1 << bit
        else:
            self.flags[word] &= ~(1 << bit) & 0xFFFF


@dataclass
class City:
    """One entry of the city table.

    ``buildings`` holds the four building-flag bytes as one integer, so bit
    ``n`` is the improvement with id ``n``. A trading-city value of
    ``NO_TRADE_ROUTE`` means no route; it shares its value with the last
    city name.
    """

    buildings: int = 0
    coords: Coordinates = field(default_factory=Coordinates)
    status: int = 0
    actual_size: int = 0
    visible_size: int = 0
    current_production: int = 0
    base_trade: int = 0
    owning_civ: int = 0
    food_storage: int = 0
    shields_storage: int = 0
    squares_and_specialists: bytes = bytes(6)
    name_id: CityId = CityId(0)
    trading_cities: list[CityId] = field(
        default_factory=lambda: [CityId(NO_TRADE_ROUTE)] * 3
    )
    unknown: bytes = bytes(2)

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IBBBBBBBBHH6sB3s2s")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        (
            buildings, x, y, status, actual, visible, production, trade,
            owner, food, shields, squares, name_id, trading, unknown,
        ) = _unpack(cls, data)
        return cls(
            buildings=buildings,
            coords=Coordinates(x, y),
            status=status,
            actual_size=actual,
            visible_size=visible,
            current_production=production,
            base_trade=trade,
            owning_civ=owner,
            food_storage=food,
            shields_storage=shields,
            squares_and_specialists=squares,
            name_id=CityId(name_id),
            trading_cities=[CityId(value) for value in trading],
            unknown=unknown,
        )

    def to_bytes(self):
        return _pack(
            self._STRUCT,
            self.buildings,
            self.coords.x,
            self.coords.y,
            self.status,
            self.actual_size,
            self.visible_size,
            self.current_production,
            self.base_trade,
            self.owning_civ,
            self.food_storage,
            self.shields_storage,
            _fixed(self.squares_and_specialists, 6, "squares_and_specialists"),
            int(self.name_id),
            _fixed(bytes(int(c) for c in self.trading_cities), 3, "trading_cities"),
            _fixed(self.unknown, 2, "unknown"),
        )

    def has_building(self, improvement):
        """Return whether the improvement with this id is built."""
        return bool(self.buildings >> int(CityImprovement(improvement)) & 1)


@dataclass
class UnitType:
    """Statistics of one of the unit types."""

    raw_name: bytes = bytes(12)
    cancelling_tech: Union[TechID, int] = TechID.NONE
    terrain: Union[TerrainCategory, int] = TerrainCategory.LAND
    total_moves: int = 0
    turns_outdoors: int = 0
    attack: int = 0
    defense: int = 0
    cost: int = 0
    sight_range: int = 0
    transport_capacity: int = 0
    role: Union[UnitRole, int] = UnitRole.SETTLER
    unlocking_tech: Union[TechID, int] = TechID.NONE

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<12s11H")
    SIZE: ClassVar[int] = _STRUCT.size
    NAME_SIZE: ClassVar[int] = 12

    @property
    def name(self) -> str:
        return decode_name(self.raw_name)

    @name.setter
    def name(self, value: str) -> None:
        self.raw_name = encode_name(value, self.NAME_SIZE)

    @property
    def shield_cost(self) -> int:
        """Shields needed to build the unit: ten times ``cost``."""
        return self.cost * 10

    @classmethod
    def from_bytes(cls, data):
        (
            raw_name, cancelling, terrain, moves, outdoors, attack, defense,
            cost, sight, capacity, role, unlocking,
        ) = _unpack(cls, data)
        return cls(
            raw_name=raw_name,
            cancelling_tech=_enum(TechID, cancelling),
            terrain=_enum(TerrainCategory, terrain),
            total_moves=moves,
            turns_outdoors=outdoors,
            attack=attack,
            defense=defense,
            cost=cost,
            sight_range=sight,
            transport_capacity=capacity,
            role=_enum(UnitRole, role),
            unlocking_tech=_enum(TechID, unlocking),
        )

    def to_bytes(self):
        return _pack(
            self._STRUCT,
            _fixed(self.raw_name, self.NAME_SIZE, "raw_name"),
            int(self.cancelling_tech),
            int(self.terrain),
            self.total_moves,
            self.turns_outdoors,
            self.attack,
            self.defense,
            self.cost,
            self.sight_range,
            self.transport_capacity,
            int(self.role),
            int(self.unlocking_tech),
        )


@dataclass
class Unit:
    """One unit slot of a civilization; type ``NONE`` marks an empty slot."""

    status: int = 0
    position: Coordinates = field(default_factory=Coordinates)
    type: Union[UnitTypeMap, int] = UnitTypeMap.NONE
    remaining_moves: int = 0
    special_moves: int = 0
    goto: Coordinates = field(default_factory=Coordinates)
    unknown: int = 0
    visibility: int = 0
    next_in_stack: int = 0
    home_city: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<12B")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        (
            status, x, y, unit_type, remaining, special, goto_x, goto_y,
            unknown, visibility, next_unit, home,
        ) = _unpack(cls, data)
        return cls(
            status=status,
            position=Coordinates(x, y),
            type=_enum(UnitTypeMap, unit_type),
            remaining_moves=remaining,
            special_moves=special,
            goto=Coordinates(goto_x, goto_y),
            unknown=unknown,
            visibility=visibility,
            next_in_stack=next_unit,
            home_city=home,
        )

    def to_bytes(self):
        return _pack(
            self._STRUCT,
            self.status,
            self.position.x,
            self.position.y,
            int(self.type),
            self.remaining_moves,
            self.special_moves,
            self.goto.x,
            self.goto.y,
            self.unknown,
            self.visibility,
            self.next_in_stack,
            self.home_city,
        )


@dataclass
class Wonders:
    """Index of the city owning each wonder; ``NOT_BUILT`` if none does."""

    unknown: bytes = bytes(2)
    pyramids: int = NOT_BUILT
    hanging_gardens: int = NOT_BUILT
    colossus: int = NOT_BUILT
    lighthouse: int = NOT_BUILT
    great_library: int = NOT_BUILT
    oracle: int = NOT_BUILT
    great_wall: int = NOT_BUILT
    magellans_expedition: int = NOT_BUILT
    michelangelos_chapel: int = NOT_BUILT
    copernicus_observatory: int = NOT_BUILT
    shakespeares_theatre: int = NOT_BUILT
    isaac_newtons_college: int = NOT_BUILT
    js_bachs_cathedral: int = NOT_BUILT
    darwins_voyage: int = NOT_BUILT
    hoover_dam: int = NOT_BUILT
    womens_suffrage: int = NOT_BUILT
    manhattan_project: int = NOT_BUILT
    united_nations: int = NOT_BUILT
    apollo_program: int = NOT_BUILT
    seti_program: int = NOT_BUILT
    cure_for_cancer: int = NOT_BUILT

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<2s21H")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        return cls(*_unpack(cls, data))

    def to_bytes(self):
        owners = [getattr(self, f.name) for f in fields(self)[1:]]
        return _pack(self._STRUCT, _fixed(self.unknown, 2, "unknown"), *owners)


@dataclass
class UnitsLost:
    """Number of units lost by one civilization, per unit type."""

    counts: list[int] = field(default_factory=lambda: [0] * _UNIT_TYPE_COUNT)

    _STRUCT: ClassVar[struct.Struct] = struct.Struct(f"<{_UNIT_TYPE_COUNT}H")
    SIZE: ClassVar[int] = _STRUCT.size

    def __getitem__(self, unit_type) -> int:
        return self.counts[int(unit_type)]

    def __setitem__(self, unit_type, value: int) -> None:
        self.counts[int(unit_type)] = value

    @classmethod
    def from_bytes(cls, data):
        return cls(list(_unpack(cls, data)))

    def to_bytes(self):
        return _pack(self._STRUCT, *self.counts)


@dataclass
class Palace:
    """The player's palace: seven building parts, three garden parts and styles."""

    unknown0: bytes = bytes(2)
    building_parts: list[Union[PalacePart, int]] = field(
        default_factory=lambda: [PalacePart.EMPTY] * 7
    )
    unknown1: bytes = bytes(2)
    garden_parts: list[Union[PalacePart, int]] = field(
        default_factory=lambda: [PalacePart.EMPTY] * 3
    )
    unknown2: bytes = bytes(2)
    building_styles: list[Union[PalacePartStyle, int]] = field(
        default_factory=lambda: [PalacePartStyle.MEDIEVAL_EUROPE] * 7
    )
    unknown3: bytes = bytes(8)

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<2s7H2s3H2s7H8s")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        values = _unpack(cls, data)
        return cls(
            unknown0=values[0],
            building_parts=[_enum(PalacePart, v) for v in values[1:8]],
            unknown1=values[8],
            garden_parts=[_enum(PalacePart, v) for v in values[9:12]],
            unknown2=values[12],
            building_styles=[_enum(PalacePartStyle, v) for v in values[13:20]],
            unknown3=values[20],
        )

    def to_bytes(self):
        for name, parts, count in (
            ("building_parts", self.building_parts, 7),
            ("garden_parts", self.garden_parts, 3),
            ("building_styles", self.building_styles, 7),
        ):
            if len(parts) != count:
                raise ValueError(f"{name} must hold {count} values, got {len(parts)}")
        return _pack(
            self._STRUCT,
            _fixed(self.unknown0, 2, "unknown0"),
            *(int(p) for p in self.building_parts),
            _fixed(self.unknown1, 2, "unknown1"),
            *(int(p) for p in self.garden_parts),
            _fixed(self.unknown2, 2, "unknown2"),
            *(int(s) for s in self.building_styles),
            _fixed(self.unknown3, 8, "unknown3"),
        )