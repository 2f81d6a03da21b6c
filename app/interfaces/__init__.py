"""
Interfaces layer package.

HTTP routers and their Pydantic schemas. Routes translate requests into
use case calls and wrap the results in the response envelope.
"""
