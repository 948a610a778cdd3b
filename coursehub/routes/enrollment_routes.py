import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from coursehub.auth.dependencies import Identity, get_current_identity
from coursehub.database import get_db
from coursehub.models.course import Course
from coursehub.models.enrollment import Enrollment
from coursehub.models.user import User
from coursehub.routes.errors import not_found, server_error
from coursehub.schemas import (
    EnrolledCoursesResponse,
    EnrollmentEnvelope,
    EnrollmentRequest,
    MessageResponse,
)

router = APIRouter(tags=['enrollments'])

logger = logging.getLogger(__name__)

ALREADY_ENROLLED_DETAIL = 'User is already enrolled in this course'


@router.post('', response_model=EnrollmentEnvelope, status_code=status.HTTP_201_CREATED)
def enroll(
    data: EnrollmentRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        existing_enrollment = db.get(Enrollment, (data.course_id, data.user_id))
        if existing_enrollment:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=ALREADY_ENROLLED_DETAIL,
            )

        if db.get(Course, data.course_id) is None:
            raise not_found('Course not found')
        if db.get(User, data.user_id) is None:
            raise not_found('User not found')

        enrollment = Enrollment(course_id=data.course_id, user_id=data.user_id)
        db.add(enrollment)
        db.commit()

        logger.info('User %s enrolled user %s in course %s', identity.id, data.user_id, data.course_id)
        return {'message': 'Enrollment successful', 'enrollment': enrollment}
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ALREADY_ENROLLED_DETAIL,
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Enrollment failed') from exc


@router.delete('', response_model=MessageResponse)
def disenroll(
    data: EnrollmentRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        enrollment = db.get(Enrollment, (data.course_id, data.user_id))
        if enrollment is None:
            raise not_found('Enrollment not found')

        db.delete(enrollment)
        db.commit()

        logger.info('User %s removed user %s from course %s', identity.id, data.user_id, data.course_id)
        return {'message': 'Disenrollment successful'}
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Disenrollment failed') from exc


@router.get('/{user_id}', response_model=EnrolledCoursesResponse)
def list_enrolled_courses(user_id: int, db: Session = Depends(get_db)):
    try:
        if db.get(User, user_id) is None:
            raise not_found('User not found')

        courses = db.query(Course).join(
            Enrollment, Enrollment.course_id == Course.id,
        ).filter(
            Enrollment.user_id == user_id,
        ).order_by(Course.id.asc()).all()

        return {'enrolledCourses': courses}
    except SQLAlchemyError as exc:
        raise server_error('Get enrolled courses failed') from exc
