"""Course model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String
from coursehub.database import Base


class Course(Base):
    """Represents a course taught by an instructor."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String)
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
