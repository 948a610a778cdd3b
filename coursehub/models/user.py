"""User model definitions."""

from sqlalchemy import Column, Integer, String
from coursehub.database import Base

ROLES = ('student', 'instructor')


class User(Base):
    """Represents a registered student or instructor."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    role = Column(String, nullable=False)  # student/instructor
