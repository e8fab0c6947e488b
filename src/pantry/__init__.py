"""Pantry - persistence core for a food-tracking application.

Stores user accounts and their food items (name and expiry date) and
exposes them through small repository capability contracts:

    pantry/
    ├── domain/            # Value objects, entities, repository contracts
    ├── infrastructure/    # SQLAlchemy tables, engine and repositories
    └── application/       # Commands used by request handlers
"""

__version__ = "0.1.0"
