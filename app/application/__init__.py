"""
Application layer package.

One use case per module, each a class with a single ``execute`` method.
Use cases depend on domain ports and never on infrastructure.
"""
