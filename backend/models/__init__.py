# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from models.amalan_record import AmalanRecord

__all__ = [
    "AmalanRecord",
]
