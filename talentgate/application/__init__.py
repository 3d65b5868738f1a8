"""Application layer: services composing domain policies and ports."""
