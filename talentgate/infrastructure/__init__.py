"""Infrastructure adapters: structlog, Casbin, SQLAlchemy, audit sinks."""
