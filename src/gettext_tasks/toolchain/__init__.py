"""Wrappers around the external gettext binaries."""
