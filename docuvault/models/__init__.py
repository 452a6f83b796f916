"""ORM Models - SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata knows every table before create_all
"""

from docuvault.models.kv_entry import KeyValueEntry  # noqa: F401
