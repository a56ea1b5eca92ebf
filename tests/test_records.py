import struct

import pytest

from civsve.enums import (
    CityId,
    CityImprovement,
    PalacePart,
    PalacePartStyle,
    TechID,
    TerrainCategory,
    UnitRole,
    UnitTypeMap,
)
from civsve.records import (
    NOT_BUILT,
    City,
    Coordinates,
    DiscoveredAdvances,
    Palace,
    Unit,
    UnitsLost,
    UnitType,
    Wonders,
    decode_name,
    encode_name,
)


def _counting(size):
    return bytes(i % 256 for i in range(size))


def test_decode_name_stops_at_nul():
    assert decode_name(b"Caesar\x00\x00junk!") == "Caesar"


def test_decode_name_without_terminator():
    assert decode_name(b"Babylonians!") == "Babylonians!"


def test_encode_name_pads_with_nul():
    encoded = encode_name("Caesar", 14)
    assert len(encoded) == 14
    assert encoded.startswith(b"Caesar\x00")
    assert decode_name(encoded) == "Caesar"


def test_encode_name_longest_fitting():
    encoded = encode_name("A" * 13, 14)
    assert encoded == b"A" * 13 + b"\x00"


@pytest.mark.parametrize("name", ["A" * 14, "A" * 20])
def test_encode_name_too_long(name):
    with pytest.raises(ValueError):
        encode_name(name, 14)


def test_encode_name_unencodable():
    with pytest.raises(ValueError):
        encode_name("\u6771\u4eac", 14)


@pytest.mark.parametrize("fill", [0x00, 0xFF, 0x5A])
def test_round_trip_preserves_bytes(fill):
    def filled(size):
        return bytes([fill]) * size

    data = filled(Coordinates.SIZE)
    assert Coordinates.from_bytes(data).to_bytes() == data
    data = filled(DiscoveredAdvances.SIZE)
    assert DiscoveredAdvances.from_bytes(data).to_bytes() == data
    data = filled(City.SIZE)
    assert City.from_bytes(data).to_bytes() == data
    data = filled(UnitType.SIZE)
    assert UnitType.from_bytes(data).to_bytes() == data
    data = filled(Unit.SIZE)
    assert Unit.from_bytes(data).to_bytes() == data
    data = filled(Wonders.SIZE)
    assert Wonders.from_bytes(data).to_bytes() == data
    data = filled(UnitsLost.SIZE)
    assert UnitsLost.from_bytes(data).to_bytes() == data
    data = filled(Palace.SIZE)
    assert Palace.from_bytes(data).to_bytes() == data


def test_round_trip_counting_bytes():
    data = _counting(Coordinates.SIZE)
    assert Coordinates.from_bytes(data).to_bytes() == data
    data = _counting(DiscoveredAdvances.SIZE)
    assert DiscoveredAdvances.from_bytes(data).to_bytes() == data
    data = _counting(City.SIZE)
    assert City.from_bytes(data).to_bytes() == data
    data = _counting(UnitType.SIZE)
    assert UnitType.from_bytes(data).to_bytes() == data
    data = _counting(Unit.SIZE)
    assert Unit.from_bytes(data).to_bytes() == data
    data = _counting(Wonders.SIZE)
    assert Wonders.from_bytes(data).to_bytes() == data
    data = _counting(UnitsLost.SIZE)
    assert UnitsLost.from_bytes(data).to_bytes() == data
    data = _counting(Palace.SIZE)
    assert Palace.from_bytes(data).to_bytes() == data


def test_default_matches_size():
    assert len(Coordinates().to_bytes()) == Coordinates.SIZE
    assert len(DiscoveredAdvances().to_bytes()) == DiscoveredAdvances.SIZE
    assert len(City().to_bytes()) == City.SIZE
    assert len(UnitType().to_bytes()) == UnitType.SIZE
    assert len(Unit().to_bytes()) == Unit.SIZE
    assert len(Wonders().to_bytes()) == Wonders.SIZE
    assert len(UnitsLost().to_bytes()) == UnitsLost.SIZE
    assert len(Palace().to_bytes()) == Palace.SIZE


@pytest.mark.parametrize("delta", [1, -1])
def test_wrong_length_rejected(delta):
    with pytest.raises(ValueError):
        Coordinates.from_bytes(bytes(Coordinates.SIZE + delta))
    with pytest.raises(ValueError):
        DiscoveredAdvances.from_bytes(bytes(DiscoveredAdvances.SIZE + delta))
    with pytest.raises(ValueError):
        City.from_bytes(bytes(City.SIZE + delta))
    with pytest.raises(ValueError):
        UnitType.from_bytes(bytes(UnitType.SIZE + delta))
    with pytest.raises(ValueError):
        Unit.from_bytes(bytes(Unit.SIZE + delta))
    with pytest.raises(ValueError):
        Wonders.from_bytes(bytes(Wonders.SIZE + delta))
    with pytest.raises(ValueError):
        UnitsLost.from_bytes(bytes(UnitsLost.SIZE + delta))
    with pytest.raises(ValueError):
        Palace.from_bytes(bytes(Palace.SIZE + delta))


def test_documented_sizes():
    assert Unit.SIZE == 12
    assert DiscoveredAdvances.SIZE == 10
    assert City.SIZE == 28
    assert len(Unit().to_bytes()) == 12
    assert len(DiscoveredAdvances().to_bytes()) == 10
    assert len(City().to_bytes()) == 28


def test_coordinates_from_bytes():
    coords = Coordinates.from_bytes(b"\x03\x04")
    assert (coords.x, coords.y) == (3, 4)
    assert Coordinates(3, 4).to_bytes() == b"\x03\x04"


def test_coordinates_out_of_range():
    with pytest.raises(ValueError):
        Coordinates(300, 0).to_bytes()


@pytest.mark.parametrize(
    "data, tech",
    [
        (b"\x01\x00" + bytes(8), TechID.ALPHABET),
        (b"\x00\x80" + bytes(8), TechID.ELECTRONICS),
        (bytes(2) + b"\x01\x00" + bytes(6), TechID.MASONRY),
        (bytes(8) + b"\x80\x00", TechID.FUTURE_TECH),
    ],
)
def test_has_tech_bit_layout(data, tech):
    advances = DiscoveredAdvances.from_bytes(data)
    assert advances.has_tech(tech)
    others = [t for t in TechID if t is not TechID.NONE and t is not tech]
    assert not any(advances.has_tech(t) for t in others)


def test_set_tech_writes_expected_bit():
    advances = DiscoveredAdvances()
    advances.set_tech(TechID.MASONRY)
    assert advances.to_bytes() == bytes(2) + b"\x01\x00" + bytes(6)
    advances.set_tech(TechID.MASONRY, False)
    assert advances.to_bytes() == bytes(10)
    assert not advances.has_tech(TechID.MASONRY)


def test_set_tech_keeps_other_bits():
    advances = DiscoveredAdvances.from_bytes(b"\xff" * 10)
    advances.set_tech(TechID.CURRENCY, False)
    assert not advances.has_tech(TechID.CURRENCY)
    assert advances.has_tech(TechID.ALPHABET)
    assert advances.has_tech(TechID.ATOMIC_THEORY)


@pytest.mark.parametrize("tech", [TechID.NONE, -1, 80])
def test_tech_out_of_range(tech):
    advances = DiscoveredAdvances()
    with pytest.raises(ValueError):
        advances.has_tech(tech)
    with pytest.raises(ValueError):
        advances.set_tech(tech, True)


def test_advances_wrong_word_count():
    with pytest.raises(ValueError):
        DiscoveredAdvances(flags=[0] * 4).to_bytes()


def _city_bytes():
    return (
        bytes([0x01, 0x00, 0x80, 0x00])  # buildings
        + bytes([10, 20])  # coordinates
        + bytes([0x02, 5, 4, 7, 3, 1])  # status, sizes, production, trade, owner
        + b"\x05\x00"  # food
        + b"\x09\x00"  # shields
        + bytes(6)
        + bytes([CityId.ROME_ROMAN])
        + bytes([CityId.ATHENS_GREEK, 0xFF, 0xFF])
        + b"\x00\x00"
    )


def test_city_fields():
    city = City.from_bytes(_city_bytes())
    assert (city.coords.x, city.coords.y) == (10, 20)
    assert city.actual_size == 5
    assert city.visible_size == 4
    assert city.owning_civ == 1
    assert city.food_storage == 5
    assert city.shields_storage == 9
    assert city.name_id is CityId.ROME_ROMAN
    assert city.trading_cities[0] is CityId.ATHENS_GREEK
    assert city.to_bytes() == _city_bytes()


def test_city_buildings():
    city = City.from_bytes(_city_bytes())
    assert city.has_building(CityImprovement.AQUEDUCT)
    assert city.has_building(CityImprovement.SS_STRUCTURAL)
    assert not city.has_building(CityImprovement.BARRACKS)
    assert not city.has_building(CityImprovement.LIBRARY)


def test_city_bad_squares_length():
    city = City(squares_and_specialists=b"\x00")
    with pytest.raises(ValueError):
        city.to_bytes()


def test_unit_fields():
    data = bytes([0x20, 7, 8, UnitTypeMap.CATAPULT, 1, 0, 9, 10, 0, 0xFE, 3, 4])
    unit = Unit.from_bytes(data)
    assert unit.type is UnitTypeMap.CATAPULT
    assert (unit.position.x, unit.position.y) == (7, 8)
    assert (unit.goto.x, unit.goto.y) == (9, 10)
    assert unit.next_in_stack == 3
    assert unit.home_city == 4
    assert unit.to_bytes() == data


def test_unit_empty_slot():
    unit = Unit.from_bytes(b"\xff" * Unit.SIZE)
    assert unit.type is UnitTypeMap.NONE


def test_unit_unknown_type_kept():
    data = bytes([0, 0, 0, 0x50]) + bytes(8)
    unit = Unit.from_bytes(data)
    assert unit.type == 0x50
    assert unit.to_bytes() == data


def _unit_type_bytes():
    return b"Catapult\x00\x00\x00\x00" + struct.pack(
        "<11H",
        TechID.METALLURGY,
        TerrainCategory.LAND,
        1, 0, 6, 1, 4, 0, 0,
        UnitRole.LAND_ATTACK,
        TechID.MATHEMATICS,
    )


def test_unit_type_fields():
    unit_type = UnitType.from_bytes(_unit_type_bytes())
    assert unit_type.name == "Catapult"
    assert unit_type.cancelling_tech is TechID.METALLURGY
    assert unit_type.terrain is TerrainCategory.LAND
    assert unit_type.attack == 6
    assert unit_type.role is UnitRole.LAND_ATTACK
    assert unit_type.unlocking_tech is TechID.MATHEMATICS
    assert unit_type.to_bytes() == _unit_type_bytes()


def test_unit_type_shield_cost_is_tenfold():
    unit_type = UnitType(cost=1)
    assert unit_type.shield_cost == 10


def test_unit_type_rename():
    unit_type = UnitType.from_bytes(_unit_type_bytes())
    unit_type.name = "Trebuchet"
    again = UnitType.from_bytes(unit_type.to_bytes())
    assert again.name == "Trebuchet"
    assert again.attack == unit_type.attack
    with pytest.raises(ValueError):
        unit_type.name = "A" * 12


def test_wonders_fields():
    data = b"\x00\x00" + b"\x05\x00" + b"\xff\xff" * 20
    wonders = Wonders.from_bytes(data)
    assert wonders.pyramids == 5
    assert wonders.hanging_gardens == NOT_BUILT
    assert wonders.cure_for_cancer == NOT_BUILT
    assert wonders.to_bytes() == data


def test_wonders_default_is_unbuilt():
    assert Wonders().to_bytes() == b"\x00\x00" + b"\xff\xff" * 21


def test_units_lost_indexing():
    data = bytes(UnitsLost.SIZE - 2) + b"\x07\x00"
    lost = UnitsLost.from_bytes(data)
    assert lost[UnitTypeMap.CARAVAN] == 7
    assert lost[UnitTypeMap.SETTLERS] == 0
    lost[UnitTypeMap.SETTLERS] = 2
    assert lost.to_bytes() == b"\x02\x00" + data[2:]


def test_units_lost_rejects_none_type():
    with pytest.raises(IndexError):
        UnitsLost()[UnitTypeMap.NONE]


def test_palace_fields():
    data = (
        bytes(2)
        + b"\xff\xff" * 7
        + bytes(2)
        + b"\x03\x00" * 3
        + bytes(2)
        + b"\x02\x00" * 7
        + bytes(8)
    )
    palace = Palace.from_bytes(data)
    assert palace.building_parts == [PalacePart.CANNOT_BE_BUILT] * 7
    assert palace.garden_parts == [PalacePart.LEVEL_3] * 3
    assert palace.building_styles == [PalacePartStyle.ARABIAN] * 7
    assert palace.to_bytes() == data


def test_palace_wrong_part_count():
    palace = Palace(garden_parts=[PalacePart.EMPTY] * 2)
    with pytest.raises(ValueError):
        palace.to_bytes()