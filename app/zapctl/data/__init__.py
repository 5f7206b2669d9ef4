"""Bundled data files for zapctl."""
