"""Presentation layer: public API, pytest plugin, command line."""
