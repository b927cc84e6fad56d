"""Textual widgets that drive the scanner from an ``Input``."""
