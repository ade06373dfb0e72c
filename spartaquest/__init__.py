"""A turn-based text role-playing game for the terminal: battles, a shop and equipment upgrades."""

__version__ = "0.1.0"