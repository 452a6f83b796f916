"""Services Layer - stateful shell around the pure core.

Invariants:
    - Services receive storage and collaborators through their constructors
    - Core functions do the thinking; services hold state and do IO

Design Decisions:
    - One DocumentStore per AppContext, shared by reference with AccountSession
"""
