"""Services Layer — domain orchestration over an injected FavoritesStore.

Invariants:
    - Services never import SQLAlchemy; persistence goes through the store Protocol

Design Decisions:
    - One service class for the whole favorites domain: three small aggregates
      that share existence checks and pagination
"""
