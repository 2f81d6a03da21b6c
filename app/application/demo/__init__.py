"""Demo bounded context, application layer (one use case per operation)."""
