"""The complete layout of a Civilization save game (.SVE) and its file I/O."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from pathlib import Path
from typing import Any, ClassVar, Optional, Union

from .enums import (
    CivID,
    DifficultyLevel,
    DiplomaticStatus,
    Government,
    Strategy,
    TechID,
)
from .records import (
    City,
    DiscoveredAdvances,
    Palace,
    Unit,
    UnitsLost,
    UnitType,
    Wonders,
    decode_name,
)

__all__ = [
    "CIV_COUNT",
    "SAVE_SIZE",
    "InvalidSaveFileError",
    "SaveFile",
    "read_sve_file",
    "write_sve_file",
]

log = logging.getLogger(__name__)

CIV_COUNT = 8
_CONTINENTS = 16
_UNITS_PER_CIV = 128
_UNIT_TYPES = 28
_CITIES = 128
_CITY_NAMES = 256


class InvalidSaveFileError(ValueError):
    """Raised when data does not have the shape of a save game."""


def _member(enum_cls: Optional[type], value: int):
    if enum_cls is None:
        return value
    if issubclass(enum_cls, IntFlag):
        return enum_cls(value)
    try:
        return enum_cls(value)
    except ValueError:
        return value


class _Word:
    """A 16-bit little-endian integer, optionally mapped onto an enum."""

    size = 2

    def __init__(self, enum: Optional[type] = None, signed: bool = False):
        self.enum = enum
        self.signed = signed

    def decode(self, data) -> Any:
        return _member(self.enum, int.from_bytes(data, "little", signed=self.signed))

    def encode(self, value) -> bytes:
        try:
            return int(value).to_bytes(2, "little", signed=self.signed)
        except OverflowError as exc:
            raise ValueError(f"{value!r} does not fit a 16-bit field") from exc


class _Blob:
    """Raw bytes of a fixed length."""

    def __init__(self, size: int):
        self.size = size

    def decode(self, data) -> bytes:
        return bytes(data)

    def encode(self, value) -> bytes:
        value = bytes(value)
        if len(value) != self.size:
            raise ValueError(f"expected {self.size} bytes, got {len(value)}")
        return value


class _Record:
    """A record class from :mod:`civsve.records`."""

    def __init__(self, record_cls: type):
        self.record_cls = record_cls
        self.size = record_cls.SIZE

    def decode(self, data) -> Any:
        return self.record_cls.from_bytes(data)

    def encode(self, value) -> bytes:
        return value.to_bytes()


class _Array:
    """A fixed number of items of one codec, as a list."""

    def __init__(self, item, count: int):
        self.item = item
        self.count = count
        self.size = item.size * count

    def decode(self, data) -> list:
        step = self.item.size
        return [self.item.decode(data[start:start + step]) for start in range(0, self.size, step)]

    def encode(self, value) -> bytes:
        items = list(value)
        if len(items) != self.count:
            raise ValueError(f"expected {self.count} items, got {len(items)}")
        return b"".join(self.item.encode(item) for item in items)


def _per_civ(item) -> _Array:
    return _Array(item, CIV_COUNT)


def _words(count: int, enum: Optional[type] = None, signed: bool = False) -> _Array:
    return _Array(_Word(enum, signed), count)


_LAYOUT: tuple = (
    ("game_turn", _Word()),
    ("human_player_civ", _Word()),
    ("human_player_civ_bitflag", _Word()),
    ("random_map_seed", _Word()),
    ("current_year", _Word()),
    ("difficulty", _Word(DifficultyLevel)),
    ("active_civilizations", _Word()),
    ("current_research", _Word(TechID)),
    ("raw_leader_names", _per_civ(_Blob(14))),
    ("raw_civ_names", _per_civ(_Blob(12))),
    ("raw_citizen_names", _per_civ(_Blob(11))),
    ("gold", _words(CIV_COUNT)),
    ("research_progress", _words(CIV_COUNT)),
    ("active_units", _per_civ(_words(_UNIT_TYPES, signed=True))),
    ("units_in_production", _per_civ(_words(_UNIT_TYPES))),
    ("discovered_advances_count", _words(CIV_COUNT)),
    ("discovered_advances", _per_civ(_Record(DiscoveredAdvances))),
    ("governments", _words(CIV_COUNT, Government)),
    ("continent_strategies", _per_civ(_words(_CONTINENTS, Strategy))),
    ("diplomacy", _per_civ(_words(CIV_COUNT, DiplomaticStatus))),
    ("city_counts", _words(CIV_COUNT)),
    ("unit_counts", _words(CIV_COUNT)),
    ("land_counts", _words(CIV_COUNT)),
    ("settler_counts", _words(CIV_COUNT)),
    ("total_civ_size", _words(CIV_COUNT)),
    ("military_power", _words(CIV_COUNT)),
    ("civ_rankings", _words(CIV_COUNT)),
    ("tax_rates", _words(CIV_COUNT)),
    ("civ_scores", _words(CIV_COUNT)),
    ("human_contact_turns", _words(CIV_COUNT)),
    ("starting_position_x", _words(CIV_COUNT)),
    ("civ_identities", _words(CIV_COUNT, CivID)),
    ("continent_defense", _per_civ(_words(_CONTINENTS))),
    ("continent_attack", _per_civ(_words(_CONTINENTS))),
    ("continent_city_counts", _per_civ(_words(_CONTINENTS))),
    ("continent_sizes", _words(64)),
    ("ocean_sizes", _words(64)),
    ("continent_building_sites", _words(_CONTINENTS)),
    ("score_chart", _Blob(1200)),
    ("peace_chart", _Blob(1200)),
    ("cities", _Array(_Record(City), _CITIES)),
    ("unit_types", _Array(_Record(UnitType), _UNIT_TYPES)),
    ("units", _per_civ(_Array(_Record(Unit), _UNITS_PER_CIV))),
    ("map_visibility", _Blob(4000)),
    ("strategic_locations_status", _Blob(128)),
    ("strategic_locations_policy", _Blob(128)),
    ("strategic_locations_x", _Blob(128)),
    ("strategic_locations_y", _Blob(128)),
    ("tech_first_inventors", _words(72, CivID)),
    ("destroyed_unit_counts", _per_civ(_words(CIV_COUNT))),
    ("raw_city_names", _Array(_Blob(13), _CITY_NAMES)),
    ("replay", _Blob(4098)),
    ("wonders", _Record(Wonders)),
    ("units_lost", _per_civ(_Record(UnitsLost))),
    ("tech_sources", _per_civ(_Blob(72))),
    ("polluted_square_count", _Word()),
    ("pollution_level", _Word()),
    ("global_warming_count", _Word()),
    ("game_settings", _Word()),
    ("land_pathfinding", _Blob(260)),
    ("max_tech_count", _Word()),
    ("player_future_tech", _Word()),
    ("debug_switches", _Word()),
    ("science_rates", _words(CIV_COUNT)),
    ("next_anthology_turn", _Word()),
    ("cumulative_epic_rankings", _words(CIV_COUNT)),
    ("spaceships", _Blob(1462)),
    ("palace", _Record(Palace)),
    ("cities_x", _Blob(_CITY_NAMES)),
    ("cities_y", _Blob(_CITY_NAMES)),
    ("palace_level", _Word()),
    ("peace_turn_count", _Word()),
    ("ai_opponents", _Word()),
    ("spaceship_population", _words(CIV_COUNT)),
    ("spaceship_launch_year", _words(CIV_COUNT)),
    ("civ_identity_flag", _Word()),
)

SAVE_SIZE = sum(codec.size for _, codec in _LAYOUT)

_EnumOrInt = Union[IntEnum, int]


@dataclass
class SaveFile:
    """Every field of a save game, in file order.

    Name fields are kept as raw bytes so that a file is written back
    unchanged; the ``*_names`` properties give their text.
    """

    game_turn: int
    human_player_civ: int
    human_player_civ_bitflag: int
    random_map_seed: int
    current_year: int
    difficulty: _EnumOrInt
    active_civilizations: int
    current_research: _EnumOrInt
    raw_leader_names: list[bytes]
    raw_civ_names: list[bytes]
    raw_citizen_names: list[bytes]
    gold: list[int]
    research_progress: list[int]
    active_units: list[list[int]]
    units_in_production: list[list[int]]
    discovered_advances_count: list[int]
    discovered_advances: list[DiscoveredAdvances]
    governments: list[_EnumOrInt]
    continent_strategies: list[list[_EnumOrInt]]
    diplomacy: list[list[DiplomaticStatus]]
    city_counts: list[int]
    unit_counts: list[int]
    land_counts: list[int]
    settler_counts: list[int]
    total_civ_size: list[int]
    military_power: list[int]
    civ_rankings: list[int]
    tax_rates: list[int]
    civ_scores: list[int]
    human_contact_turns: list[int]
    starting_position_x: list[int]
    civ_identities: list[_EnumOrInt]
    continent_defense: list[list[int]]
    continent_attack: list[list[int]]
    continent_city_counts: list[list[int]]
    continent_sizes: list[int]
    ocean_sizes: list[int]
    continent_building_sites: list[int]
    score_chart: bytes
    peace_chart: bytes
    cities: list[City]
    unit_types: list[UnitType]
    units: list[list[Unit]]
    map_visibility: bytes
    strategic_locations_status: bytes
    strategic_locations_policy: bytes
    strategic_locations_x: bytes
    strategic_locations_y: bytes
    tech_first_inventors: list[_EnumOrInt]
    destroyed_unit_counts: list[list[int]]
    raw_city_names: list[bytes]
    replay: bytes
    wonders: Wonders
    units_lost: list[UnitsLost]
    tech_sources: list[bytes]
    polluted_square_count: int
    pollution_level: int
    global_warming_count: int
    game_settings: int
    land_pathfinding: bytes
    max_tech_count: int
    player_future_tech: int
    debug_switches: int
    science_rates: list[int]
    next_anthology_turn: int
    cumulative_epic_rankings: list[int]
    spaceships: bytes
    palace: Palace
    cities_x: bytes
    cities_y: bytes
    palace_level: int
    peace_turn_count: int
    ai_opponents: int
    spaceship_population: list[int]
    spaceship_launch_year: list[int]
    civ_identity_flag: int

    SIZE: ClassVar[int] = SAVE_SIZE

    @property
    def leader_names(self) -> list[str]:
        return [decode_name(raw) for raw in self.raw_leader_names]

    @property
    def civ_names(self) -> list[str]:
        return [decode_name(raw) for raw in self.raw_civ_names]

    @property
    def citizen_names(self) -> list[str]:
        return [decode_name(raw) for raw in self.raw_citizen_names]

    @property
    def city_names(self) -> list[str]:
        return [decode_name(raw) for raw in self.raw_city_names]

    @classmethod
    def from_bytes(cls, data):
        """Parse a whole save game; the data must be exactly ``SIZE`` bytes."""
        view = memoryview(bytes(data))
        if len(view) != SAVE_SIZE:
            raise InvalidSaveFileError(
                f"a save game is {SAVE_SIZE} bytes, got {len(view)}"
            )
        values = {}
        offset = 0
        for name, codec in _LAYOUT:
            values[name] = codec.decode(view[offset:offset + codec.size])
            offset += codec.size
        return cls(**values)

    def to_bytes(self):
        """Serialise the save game back to its on-disk form."""
        chunks = []
        for name, codec in _LAYOUT:
            try:
                chunks.append(codec.encode(getattr(self, name)))
            except (ValueError, TypeError) as exc:
                raise ValueError(f"{name}: {exc}") from exc
        return b"".join(chunks)


def read_sve_file(path):
    """Load a save game from *path*.

    Raises :class:`InvalidSaveFileError` if the file has the wrong size and
    :class:`OSError` if it cannot be read.
    """
    data = Path(os.fspath(path)).read_bytes()
    try:
        save = SaveFile.from_bytes(data)
    except InvalidSaveFileError as exc:
        raise InvalidSaveFileError(f"{path}: {exc}") from exc
    log.debug("SVE file loaded successfully from %s", path)
    return save


def write_sve_file(save, path):
    """Write *save* to *path*, replacing any existing file."""
    Path(os.fspath(path)).write_bytes(save.to_bytes())