"""Frostfire: a small fire-and-ice tile puzzle."""
