"""Raid seed generation, den data and sys-botbase automation for Sword and Shield."""

__version__ = "0.1.0"