"""Bundled data files for bulkedit."""
