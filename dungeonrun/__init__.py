"""A small turn-based text role-playing game: a hero, monsters, potions and a log."""

__version__ = "0.1.0"