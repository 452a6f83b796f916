"""Pydantic Schemas - input validation at the library boundary.

Invariants:
    - Schemas validate user-entered data (uploads, profile edits) before services mutate state

Design Decisions:
    - Schemas are input contracts; core.document.Document is the stored record
"""
