"""Locale-aware translation engine for mods."""
