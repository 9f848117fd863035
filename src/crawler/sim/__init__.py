"""Headless dungeon crawl simulation: entities, dungeon, turn engine."""
