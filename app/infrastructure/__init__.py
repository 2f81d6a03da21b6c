"""
Infrastructure layer package.

Concrete adapters for the ports declared in the domain layer.
The SQLAlchemy repositories and ORM models live here.
"""
