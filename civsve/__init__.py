"""Read, inspect and write Civilization (1991) SVE save game files."""

__version__ = "0.1.0"
__all__ = ["cli", "enums", "records", "savefile"]