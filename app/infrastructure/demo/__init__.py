"""Demo bounded context, infrastructure adapters (SQLAlchemy)."""
