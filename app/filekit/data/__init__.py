"""Bundled data files for filekit."""
