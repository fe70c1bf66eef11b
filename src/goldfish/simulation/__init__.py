"""Zones and the game state engine."""
