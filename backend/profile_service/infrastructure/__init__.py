"""Infrastructure Layer — database engine, logging and other cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic except the error hierarchy
    - All SQLAlchemy failures leaving this layer are mapped to StorageFailure
"""
