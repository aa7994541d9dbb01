"""Headless turn-based battle core for a creature-collection RPG."""
