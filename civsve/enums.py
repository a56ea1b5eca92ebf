"""Enumerations for the fields of a Civilization save game (.SVE)."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "DifficultyLevel",
    "CivID",
    "CityImprovement",
    "Government",
    "TechID",
    "DiplomaticStatus",
    "CityId",
    "Strategy",
    "PalacePart",
    "PalacePartStyle",
    "TerrainCategory",
    "UnitRole",
    "UnitTypeMap",
]


class DifficultyLevel(IntEnum):
    """Game difficulty, from easiest to hardest (16-bit)."""

    CHIEFTAIN = 0
    WARLORD = 1
    PRINCE = 2
    KING = 3
    EMPEROR = 4


class CivID(IntEnum):
    """Civilization identity, which also selects the leader graphics (16-bit).

    Any value may be given to any civilization slot; the game accepts it.
    """

    NONE = 0
    ROMANS = 1
    BABYLONIANS = 2
    GERMANS = 3
    EGYPTIANS = 4
    AMERICANS = 5
    GREEKS = 6
    INDIANS = 7
    RUSSIANS = 8
    ZULU = 9
    FRENCH = 10
    AZTECS = 11
    CHINESE = 12
    ENGLISH = 13
    MONGOLS = 14
    BARBARIANS = 0xFFFF


class CityImprovement(IntEnum):
    """City improvements, by bit index in a city's building flags (8-bit).

    The mapping is believed correct but has not been fully confirmed.
    """

    AQUEDUCT = 0
    BARRACKS = 1
    GRANARY = 2
    TEMPLE = 3
    CITY_WALLS = 4
    CATHEDRAL = 5
    COURTHOUSE = 6
    COLOSSEUM = 7
    LIBRARY = 8
    MARKETPLACE = 9
    BANK = 10
    FACTORY = 11
    HYDRO_PLANT = 12
    POWER_PLANT = 13
    MANUFACTURING_PLANT = 14
    NUCLEAR_PLANT = 15
    MASS_TRANSIT = 16
    RECYCLING_CENTER = 17
    UNIVERSITY = 18
    PALACE = 19
    SDI_DEFENSE = 20
    SS_COMPONENT = 21
    SS_MODULE = 22
    SS_STRUCTURAL = 23


class Government(IntEnum):
    """Form of government of a civilization (16-bit)."""

    ANARCHY = 0
    DESPOTISM = 1
    MONARCHY = 2
    COMMUNISM = 3
    REPUBLIC = 4
    DEMOCRACY = 5


class TechID(IntEnum):
    """Civilization advances, in tech-tree order (16-bit)."""

    ALPHABET = 0
    CODE_OF_LAWS = 1
    CURRENCY = 2
    ATOMIC_THEORY = 3
    DEMOCRACY = 4
    MONARCHY = 5
    ASTRONOMY = 6
    MAPMAKING = 7
    NAVIGATION = 8
    MATHEMATICS = 9
    MEDICINE = 10
    PHYSICS = 11
    ENGINEERING = 12
    UNIVERSITY = 13
    MAGNETISM = 14
    ELECTRONICS = 15
    MASONRY = 16
    BRONZE_WORKING = 17
    IRON_WORKING = 18
    BRIDGE_BUILDING = 19
    INVENTION = 20
    COMPUTERS = 21
    WRITING = 22
    STEAM_ENGINE = 23
    TRADE = 24
    CEREMONIAL_BURIAL = 25
    MYSTICISM = 26
    NUCLEAR_FISSION = 27
    PHILOSOPHY = 28
    RELIGION = 29
    LITERACY = 30
    HORSEBACK_RIDING = 31
    FEUDALISM = 32
    THE_WHEEL = 33
    GUNPOWDER = 34
    INDUSTRIALIZATION = 35
    CHEMISTRY = 36
    COMBUSTION = 37
    FLIGHT = 38
    ADVANCED_FLIGHT = 39
    SPACE_FLIGHT = 40
    MASS_PRODUCTION = 41
    POTTERY = 42
    COMMUNISM = 43
    THE_REPUBLIC = 44
    CONSTRUCTION = 45
    ROCKETRY = 46
    THE_CORPORATION = 47
    METALLURGY = 48
    RAILROAD = 49
    NUCLEAR_POWER = 50
    THEORY_OF_GRAVITY = 51
    STEEL = 52
    BANKING = 53
    ELECTRICITY = 54
    REFINING = 55
    EXPLOSIVES = 56
    SUPERCONDUCTOR = 57
    AUTOMOBILE = 58
    GENETIC_ENGINEERING = 59
    PLASTICS = 60
    RECYCLING = 61
    CHIVALRY = 62
    ROBOTICS = 63
    CONSCRIPTION = 64
    LABOR_UNION = 65
    FUSION_POWER = 66
    DUMMY1 = 67
    DUMMY2 = 68
    DUMMY3 = 69
    DUMMY4 = 70
    FUTURE_TECH = 71
    NONE = 0xFFFF


class DiplomaticStatus(IntFlag):
    """Bit flags of the diplomatic relation between two civilizations (16-bit).

    The meaning of several bits is unknown; combinations such as 19
    (war, peace and bit 4) occur in real games.
    """

    AT_WAR = 1 << 0
    AT_PEACE = 1 << 1
    ALLIANCE = 1 << 2
    VENDETTA = 1 << 3
    UNKNOWN_4 = 1 << 4
    UNKNOWN_5 = 1 << 5
    EMBASSY_ESTABLISHED = 1 << 6
    UNKNOWN_7 = 1 << 7
    UNKNOWN_8 = 1 << 8
    UNKNOWN_9 = 1 << 9
    UNKNOWN_10 = 1 << 10
    UNKNOWN_11 = 1 << 11
    UNKNOWN_12 = 1 << 12
    UNKNOWN_13 = 1 << 13
    UNKNOWN_14 = 1 << 14
    UNKNOWN_15 = 1 << 15


_CITY_NAMES = (
    # Roman
    "ROME_ROMAN", "CAESAREA_ROMAN", "CARTHAGE_ROMAN", "NICOPOLIS_ROMAN",
    "BYZANTIUM_ROMAN", "BRUNDISIUM_ROMAN", "SYRACUSE_ROMAN", "ANTIOCH_ROMAN",
    "PALMYRA_ROMAN", "CYRENE_ROMAN", "GORDION_ROMAN", "TYRUS_ROMAN",
    "JERUSALEM_ROMAN", "SELEUCIA_ROMAN", "RAVENNA_ROMAN", "ARTAXATA_ROMAN",
    # Babylonian
    "BABYLON_BABYLONIAN", "SUMER_BABYLONIAN", "URUK_BABYLONIAN",
    "NINEVEH_BABYLONIAN", "ASHUR_BABYLONIAN", "ELLIPI_BABYLONIAN",
    "AKKAD_BABYLONIAN", "ERIDU_BABYLONIAN", "KISH_BABYLONIAN",
    "NIPPUR_BABYLONIAN", "SHURUPPAK_BABYLONIAN", "ZARIQUM_BABYLONIAN",
    "IZIBIA_BABYLONIAN", "NIMRUD_BABYLONIAN", "ARBELA_BABYLONIAN",
    "ZAMUA_BABYLONIAN",
    # German
    "BERLIN_GERMAN", "LEIPZIG_GERMAN", "HAMBURG_GERMAN", "BREMEN_GERMAN",
    "FRANKFURT_GERMAN", "BONN_GERMAN", "NUREMBERG_GERMAN", "COLOGNE_GERMAN",
    "HANNOVER_GERMAN", "MUNICH_GERMAN", "STUTTGART_GERMAN",
    "HEIDELBURG_GERMAN", "SALZBURG_GERMAN", "KONIGSBERG_GERMAN",
    "DORTMUND_GERMAN", "BRANDENBURG_GERMAN",
    # Egyptian
    "THEBES_EGYPTIAN", "MEMPHIS_EGYPTIAN", "ORYX_EGYPTIAN",
    "HELIOPOLIS_EGYPTIAN", "GAZA_EGYPTIAN", "ALEXANDRIA_EGYPTIAN",
    "BYBLOS_EGYPTIAN", "CAIRO_EGYPTIAN", "COPTOS_EGYPTIAN", "EDFU_EGYPTIAN",
    "PITHOM_EGYPTIAN", "BUSIRIS_EGYPTIAN", "ATHRIBIS_EGYPTIAN",
    "MENDES_EGYPTIAN", "TANIS_EGYPTIAN", "ABYDOS_EGYPTIAN",
    # American
    "WASHINGTON_AMERICAN", "NEW_YORK_AMERICAN", "BOSTON_AMERICAN",
    "PHILADELPHIA_AMERICAN", "ATLANTA_AMERICAN", "CHICAGO_AMERICAN",
    "BUFFALO_AMERICAN", "ST_LOUIS_AMERICAN", "DETROIT_AMERICAN",
    "NEW_ORLEANS_AMERICAN", "BALTIMORE_AMERICAN", "DENVER_AMERICAN",
    "CINCINNATI_AMERICAN", "DALLAS_AMERICAN", "LOS_ANGELES_AMERICAN",
    "LAS_VEGAS_AMERICAN",
    # Greek
    "ATHENS_GREEK", "SPARTA_GREEK", "CORINTH_GREEK", "DELPHI_GREEK",
    "ERETRIA_GREEK", "PHARSALOS_GREEK", "ARGOS_GREEK", "MYCENAE_GREEK",
    "HERAKLEIA_GREEK", "ANTIOCH_GREEK", "EPHESOS_GREEK", "RHODES_GREEK",
    "KNOSSOS_GREEK", "TROY_GREEK", "PERGAMON_GREEK", "MILETOS_GREEK",
    # Indian
    "DELHI_INDIAN", "BOMBAY_INDIAN", "MADRAS_INDIAN", "BANGALORE_INDIAN",
    "CALCUTTA_INDIAN", "LAHORE_INDIAN", "KARACHI_INDIAN", "KOLHAPUR_INDIAN",
    "JAIPUR_INDIAN", "HYDERABAD_INDIAN", "BENGAL_INDIAN",
    "CHITTAGONG_INDIAN", "PUNJAB_INDIAN", "DACCA_INDIAN", "INDUS_INDIAN",
    "GANGES_INDIAN",
    # Russian
    "MOSCOW_RUSSIAN", "LENINGRAD_RUSSIAN", "KIEV_RUSSIAN", "MINSK_RUSSIAN",
    "SMOLENSK_RUSSIAN", "ODESSA_RUSSIAN", "SEVASTOPOL_RUSSIAN",
    "TBLISI_RUSSIAN", "SVERDLOVSK_RUSSIAN", "YAKUTSK_RUSSIAN",
    "VLADIVOSTOK_RUSSIAN", "NOVOGRAD_RUSSIAN", "KRASNOYARSK_RUSSIAN",
    "RIGA_RUSSIAN", "ROSTOV_RUSSIAN", "ASTRAKHAN_RUSSIAN",
    # Zulu
    "ZIMBABWE_ZULU", "ULUNDI_ZULU", "BAPEDI_ZULU", "HLOBANE_ZULU",
    "ISANDHLWANA_ZULU", "INTOMBE_ZULU", "MPONDO_ZULU", "NGOME_ZULU",
    "SWAZI_ZULU", "TUGELA_ZULU", "UMTATA_ZULU", "UMFOLOZI_ZULU",
    "IBABANAGO_ZULU", "ISIPEZI_ZULU", "AMATIKULU_ZULU", "ZUNGUIN_ZULU",
    # French
    "PARIS_FRENCH", "ORLEANS_FRENCH", "LYONS_FRENCH", "TOURS_FRENCH",
    "CHARTRES_FRENCH", "BORDEAUX_FRENCH", "ROUEN_FRENCH", "AVIGNON_FRENCH",
    "MARSEILLES_FRENCH", "GRENOBLE_FRENCH", "DIJON_FRENCH", "AMIENS_FRENCH",
    "CHERBOURG_FRENCH", "POITIERS_FRENCH", "TOULOUSE_FRENCH",
    "BAYONNE_FRENCH",
    # Aztec
    "TENOCHTITLAN_AZTEC", "CHIAUHTIA_AZTEC", "CHAPULTEPEC_AZTEC",
    "COATEPEC_AZTEC", "AYOTZINCO_AZTEC", "ITZAPALAPA_AZTEC",
    "IZTAPAM_AZTEC", "MITXCOAC_AZTEC", "TACUBAYA_AZTEC", "TECAMAC_AZTEC",
    "TEPEZINCO_AZTEC", "TICOMAN_AZTEC", "TLAXCALA_AZTEC", "XALTOCAN_AZTEC",
    "XICALANGO_AZTEC", "ZUMPANCO_AZTEC",
    # Chinese
    "PEKING_CHINESE", "SHANGHAI_CHINESE", "CANTON_CHINESE",
    "NANKING_CHINESE", "TSINGTAO_CHINESE", "HANGCHOW_CHINESE",
    "TIENTSIN_CHINESE", "TATUNG_CHINESE", "MACAO_CHINESE", "ANYANG_CHINESE",
    "SHANTUNG_CHINESE", "CHINAN_CHINESE", "KAIFENG_CHINESE",
    "NINGPO_CHINESE", "PAOTING_CHINESE", "YANGCHOW_CHINESE",
    # English
    "LONDON_ENGLISH", "COVENTRY_ENGLISH", "BIRMINGHAM_ENGLISH",
    "DOVER_ENGLISH", "NOTTINGHAM_ENGLISH", "YORK_ENGLISH",
    "LIVERPOOL_ENGLISH", "BRIGHTON_ENGLISH", "OXFORD_ENGLISH",
    "READING_ENGLISH", "EXETER_ENGLISH", "CAMBRIDGE_ENGLISH",
    "HASTINGS_ENGLISH", "CANTERBURY_ENGLISH", "BANBURY_ENGLISH",
    "NEWCASTLE_ENGLISH",
    # Mongol
    "SAMARKAND_MONGOL", "BOKHARA_MONGOL", "NISHAPUR_MONGOL",
    "KARAKORUM_MONGOL", "KASHGAR_MONGOL", "TABRIZ_MONGOL", "ALEPPO_MONGOL",
    "KABUL_MONGOL", "ORMUZ_MONGOL", "BASRA_MONGOL", "KHANBALYK_MONGOL",
    "KHORASAN_MONGOL", "SHANGTU_MONGOL", "KAZAN_MONGOL", "QUINSAY_MONGOL",
    "KERMAN_MONGOL",
    # Extra / overflow
    "MECCA_EXTRA", "NAPLES_EXTRA", "SIDON_EXTRA", "TYRE_EXTRA",
    "TARSUS_EXTRA", "ISSUS_EXTRA", "CUNAXA_EXTRA", "CREMONA_EXTRA",
    "CANNAE_EXTRA", "CAPUA_EXTRA", "TURIN_EXTRA", "GENOA_EXTRA",
    "UTICA_EXTRA", "CRETE_EXTRA", "DAMASCUS_EXTRA", "VERONA_EXTRA",
    "SALAMIS_EXTRA", "LISBON_EXTRA", "HAMBURG_EXTRA", "PRAGUE_EXTRA",
    "SALZBURG_EXTRA", "BERGEN_EXTRA", "VENICE_EXTRA", "MILAN_EXTRA",
    "GHENT_EXTRA", "PISA_EXTRA", "CORDOBA_EXTRA", "SEVILLE_EXTRA",
    "DUBLIN_EXTRA", "TORONTO_EXTRA", "MELBOURNE_EXTRA", "SYDNEY_EXTRA",
)

CityId = IntEnum(
    "CityId",
    [(name, index) for index, name in enumerate(_CITY_NAMES)],
    module=__name__,
)
CityId.__doc__ = """Index into the city-name table (8-bit), named NAME_CIVILIZATION.

In trade-route fields 0xFF means "no route", which collides with SYDNEY_EXTRA.
"""


class Strategy(IntEnum):
    """Per-continent AI strategy of a civilization (16-bit)."""

    SETTLE = 0
    ATTACK = 1
    DEFEND = 2
    TRANSPORT_UNITS_TO = 3


class PalacePart(IntEnum):
    """Build level of one part of the player's palace (16-bit).

    Garden parts go up to LEVEL_3, castle parts up to LEVEL_4.
    """

    EMPTY = 0
    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3
    LEVEL_4 = 4
    CANNOT_BE_BUILT = 0xFFFF


class PalacePartStyle(IntEnum):
    """Architectural style of a palace building part (16-bit)."""

    MEDIEVAL_EUROPE = 0
    ANCIENT_ROME = 1
    ARABIAN = 2


class TerrainCategory(IntEnum):
    """Where a unit type moves (16-bit)."""

    LAND = 0
    AIR = 1
    SEA = 2


class UnitRole(IntEnum):
    """Functional role of a unit type, steering AI behaviour (16-bit)."""

    SETTLER = 0
    LAND_ATTACK = 1
    DEFENSE = 2
    SEA_ATTACK = 3
    AIR_ATTACK = 4
    TRANSPORT = 5
    CIVILIAN = 6


class UnitTypeMap(IntEnum):
    """Unit type of a unit (8-bit); NONE marks an empty unit slot."""

    SETTLERS = 0
    MILITIA = 1
    PHALANX = 2
    LEGION = 3
    MUSKETEERS = 4
    RIFLEMEN = 5
    CAVALRY = 6
    KNIGHTS = 7
    CATAPULT = 8
    CANNON = 9
    CHARIOT = 10
    ARMOR = 11
    MECH_INF = 12
    ARTILLERY = 13
    FIGHTER = 14
    BOMBER = 15
    TRIREME = 16
    SAIL = 17
    FRIGATE = 18
    IRONCLAD = 19
    CRUISER = 20
    BATTLESHIP = 21
    SUBMARINE = 22
    CARRIER = 23
    TRANSPORT = 24
    NUCLEAR = 25
    DIPLOMAT = 26
    CARAVAN = 27
    NONE = 0xFF