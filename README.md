# civsve

Read, inspect and write the `.SVE` save game files of the original 1991
*Civilization*.

A save file is one fixed-size block of packed little-endian fields: the game
header, per-civilization tables, cities, unit types, units, the map
visibility layer, city names, wonders, the player's palace and more.
`civsve` decodes the whole block into Python objects and encodes it back to
bytes, so a file can be loaded, changed in Python and saved again.

## Installation

```
pip install civsve
```

No third-party libraries are needed. To run the tests:

```
pip install "civsve[test]"
pytest
```

## Command line

```
civsve
civsve path/to/CIVIL0.SVE
```

The command loads one save file and prints
`SVE file loaded successfully from <path>`, exiting with status 0. Without a
path it reads `./save_files/CIVIL0.SVE`. If the file cannot be read or does
not have the size of a save game, it prints `error: ...` to standard error and
exits with status 1.

## Library use

```python
from civsve.savefile import InvalidSaveFileError, read_sve_file, write_sve_file

try:
    save = read_sve_file("save_files/CIVIL0.SVE")
except InvalidSaveFileError as exc:
    print(f"not a valid save: {exc}")
else:
    print(save.game_turn, save.civ_names)
    save.gold[1] = 1000
    write_sve_file(save, "save_files/CIVIL1.SVE")
```

### `civsve.savefile`

- `SaveFile` is a dataclass holding every field of the file in file order
  (`game_turn`, `difficulty`, `gold`, `governments`, `diplomacy`, `cities`,
  `unit_types`, `units`, `wonders`, `palace`, ...). Blocks whose meaning is not
  decoded (score chart, replay, map visibility, spaceships and others) are
  kept as `bytes`.
- `SaveFile.from_bytes(data)` parses exactly `SAVE_SIZE` bytes and raises
  `InvalidSaveFileError` (a `ValueError`) for any other length.
  `SaveFile.to_bytes()` writes it back; unchanged data encodes to the same
  bytes it came from. A value that does not fit its field raises `ValueError`.
- The properties `leader_names`, `civ_names`, `citizen_names` and
  `city_names` give the text of the name tables, which are stored as raw
  bytes in `raw_leader_names` and the like.
- `read_sve_file(path)` loads a file, raising `InvalidSaveFileError` for a
  wrong size and `OSError` if it cannot be read. `write_sve_file(save, path)`
  writes a save game, replacing any existing file.
- `CIV_COUNT` is the number of civilization slots (8).

### `civsve.records`

The fixed-size records inside a save game: `Coordinates`,
`DiscoveredAdvances`, `City`, `UnitType`, `Unit`, `Wonders`, `UnitsLost` and
`Palace`. Each has a `SIZE`, `from_bytes(data)` and `to_bytes()`. Enumerated
fields hold the matching enum member when the value is known and the plain
integer otherwise.

```python
from civsve.enums import TechID
from civsve.records import DiscoveredAdvances

advances = DiscoveredAdvances.from_bytes(bytes(10))
advances.set_tech(TechID.BRONZE_WORKING, True)
assert advances.has_tech(TechID.BRONZE_WORKING)
```

The game also keeps a separate count of discovered advances per
civilization (`SaveFile.discovered_advances_count`); change it together with
the flags.

Other helpers:

- `City.has_building(improvement)` tests a bit of the city's building flags.
- `UnitType.name` reads and sets the type's name; `UnitType.shield_cost` is
  ten times `cost`.
- `UnitsLost` can be indexed by a `UnitTypeMap` member or an integer.
- `Wonders` fields hold the index of the owning city, or `NOT_BUILT`.
- A `City` trading-route entry of `NO_TRADE_ROUTE` means no route.
- `decode_name(raw)` and `encode_name(name, size)` convert fixed-width,
  NUL-padded text fields; `encode_name` raises `ValueError` if the name does
  not fit with its terminating NUL.

### `civsve.enums`

The game's identifiers: `DifficultyLevel`, `CivID`, `CityImprovement`,
`Government`, `TechID`, `DiplomaticStatus` (a flag set), `CityId`,
`Strategy`, `PalacePart`, `PalacePartStyle`, `TerrainCategory`, `UnitRole`
and `UnitTypeMap`. Some of them, notably `CityImprovement` and
`DiplomaticStatus`, follow community research on the format and are not
confirmed in every detail.

## What it does not do

There is no interactive editor. The `civsve` command only loads a file and
reports whether that worked; changing a save game is done from Python with
the classes above. Fields are not checked against game rules, so values the
game would reject can be written.