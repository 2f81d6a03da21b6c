"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error taxonomy, translation and handlers
- Response envelopes
- Request correlation and pipeline middleware
- Logging configuration
"""
