"""Matching core: character sets, offsets and the prefix scanner."""
