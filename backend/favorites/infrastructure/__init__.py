"""Infrastructure Layer — database sessions, store implementations, logging.

Invariants:
    - Store implementations satisfy core.repository_protocols.FavoritesStore
    - All SQLAlchemy exceptions are mapped to DatabaseError before leaving this layer

Design Decisions:
    - Store per request: SqlFavoritesStore wraps the request's AsyncSession
"""
