"""
Domain layer package.

Entities, value objects, domain errors and port interfaces.
No framework imports and no IO; the only outward dependency is the
shared error taxonomy.
"""
