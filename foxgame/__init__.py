"""Rules and state of a tile-based fox platformer: level records, player powerups, camera, particles, fades and UI widgets."""

__version__ = "0.1.0"