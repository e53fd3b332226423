"""Bundled word lists and sample texts."""
