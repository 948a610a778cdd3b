import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coursehub.database import get_db
from coursehub.models.course import Course
from coursehub.models.review import Review
from coursehub.models.user import User
from coursehub.routes.errors import not_found, server_error
from coursehub.schemas import (
    CourseReviewListResponse,
    ReviewEnvelope,
    SubmitReviewRequest,
    UpdateReviewRequest,
)

router = APIRouter(tags=['reviews'])

logger = logging.getLogger(__name__)


@router.post('/{course_id}/reviews', response_model=ReviewEnvelope, status_code=status.HTTP_201_CREATED)
def submit_review(course_id: int, data: SubmitReviewRequest, db: Session = Depends(get_db)):
    # No one-review-per-user check: repeat submissions are stored as separate rows.
    try:
        if db.get(Course, course_id) is None:
            raise not_found('Course not found')
        if db.get(User, data.user_id) is None:
            raise not_found('User not found')

        review = Review(
            course_id=course_id,
            user_id=data.user_id,
            rating=data.rating,
            comment=data.comment,
        )
        db.add(review)
        db.commit()
        db.refresh(review)

        logger.info('User %s reviewed course %s', data.user_id, course_id)
        return {'message': 'Feedback submitted successfully', 'review': review}
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Submit feedback failed') from exc


@router.put('/{course_id}/reviews/{user_id}', response_model=ReviewEnvelope)
def update_review(
    course_id: int,
    user_id: int,
    data: UpdateReviewRequest,
    db: Session = Depends(get_db),
):
    try:
        reviews = db.query(Review).filter(
            Review.course_id == course_id,
            Review.user_id == user_id,
        ).order_by(Review.id.asc()).all()

        if not reviews:
            raise not_found('Review not found')

        for review in reviews:
            if data.rating is not None:
                review.rating = data.rating
            if data.comment is not None:
                review.comment = data.comment

        db.commit()
        db.refresh(reviews[0])

        return {'message': 'Review updated successfully', 'review': reviews[0]}
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Update review failed') from exc


@router.get('/{course_id}/reviews', response_model=CourseReviewListResponse)
def list_course_reviews(course_id: int, db: Session = Depends(get_db)):
    try:
        if db.get(Course, course_id) is None:
            raise not_found('Course not found')

        rows = db.query(Review.rating, Review.comment, User.name.label('reviewer_name')).join(
            User, Review.user_id == User.id,
        ).filter(
            Review.course_id == course_id,
        ).order_by(Review.id.asc()).all()

        return {
            'reviews': [
                {'rating': rating, 'comment': comment, 'reviewer_name': reviewer_name}
                for rating, comment, reviewer_name in rows
            ]
        }
    except SQLAlchemyError as exc:
        raise server_error('Get course reviews failed') from exc
