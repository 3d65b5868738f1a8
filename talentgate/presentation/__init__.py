"""Presentation layer: thin FastAPI adapter over the permission facade."""
