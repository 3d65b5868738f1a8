"""SQLAlchemy persistence: base models, database helper, repositories."""
