"""Review model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String
from coursehub.database import Base


class Review(Base):
    """A rating and optional comment left by a user on a course."""
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(String)
