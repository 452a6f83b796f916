"""Database Infrastructure - SQLAlchemy Base shared by ORM models.

Invariants:
    - One Base for all tables; schema created via Base.metadata.create_all
"""
