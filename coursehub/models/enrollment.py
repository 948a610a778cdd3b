"""Enrollment model definitions."""

from sqlalchemy import Column, ForeignKey, Integer
from coursehub.database import Base


class Enrollment(Base):
    """Links a user to a course they joined. One row per (course, user) pair."""
    __tablename__ = "enrollments"

    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
