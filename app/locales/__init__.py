"""Bundled message catalogs.

Holds the YAML catalogs (fish.<locale>.yml) used when no other catalog
directory is configured. Keeping this as a real package ships the catalogs
as package data.
"""
