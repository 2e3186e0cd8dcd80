"""SQLAlchemy adapter – searches over mapped classes."""
from searchlight.adapters.sqlalchemy.search import SqlAlchemySearch, mapper_for

__all__ = ["SqlAlchemySearch", "mapper_for"]
