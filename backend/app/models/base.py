"""
Base Model Class
Provides the common identity column for all database models.

All application models should inherit from BaseModel instead of Base directly.
"""

from sqlalchemy import Column, Integer

from app.db.base import Base


class BaseModel(Base):
    """
    Abstract base model with the store-generated primary key.

    Provides:
    - Integer identity primary key, assigned by the database on insert
      and never changed afterwards

    Example:
        class User(BaseModel):
            __tablename__ = "users"
            name = Column(String(50))
            # id is inherited automatically
    """

    # Make this an abstract base class (no table created for BaseModel itself)
    __abstract__ = True

    # Primary Key: generated identity
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False
    )

    def __repr__(self):
        """
        String representation of model instance.
        Useful for debugging and logging.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"
