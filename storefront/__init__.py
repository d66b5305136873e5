"""Storefront: checkout utilities with pluggable collaborators."""

__version__ = "0.1.0"
