"""Catalog Admin: list/form screens over the catalog REST backend."""
