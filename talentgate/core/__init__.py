"""Core building blocks: configuration, Result types, errors, container."""
