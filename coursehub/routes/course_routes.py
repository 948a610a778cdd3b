import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coursehub.auth.dependencies import Identity, get_current_identity
from coursehub.database import get_db
from coursehub.models.course import Course
from coursehub.models.user import User
from coursehub.routes.errors import not_found, server_error
from coursehub.schemas import (
    CourseEnvelope,
    CourseListResponse,
    CreateCourseRequest,
    MessageResponse,
    UpdateCourseRequest,
)

router = APIRouter(tags=['courses'])

logger = logging.getLogger(__name__)


@router.post('', response_model=CourseEnvelope, status_code=status.HTTP_201_CREATED)
def create_course(
    data: CreateCourseRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        instructor = db.get(User, data.instructor_id)
        if instructor is None:
            raise not_found('Instructor not found')

        course = Course(
            title=data.title,
            description=data.description,
            instructor_id=data.instructor_id,
        )
        db.add(course)
        db.commit()
        db.refresh(course)

        logger.info('User %s created course %s', identity.id, course.id)
        return {'message': 'Course added successfully', 'course': course}
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Add course failed') from exc


@router.put('/{course_id}', response_model=CourseEnvelope)
def update_course(
    course_id: int,
    data: UpdateCourseRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        course = db.get(Course, course_id)
        if course is None:
            raise not_found('Course not found')

        if data.title is not None:
            course.title = data.title
        if data.description is not None:
            course.description = data.description

        db.commit()
        db.refresh(course)

        logger.info('User %s updated course %s', identity.id, course.id)
        return {'message': 'Course updated successfully', 'course': course}
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Edit course failed') from exc


@router.delete('/{course_id}', response_model=MessageResponse)
def delete_course(
    course_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        course = db.get(Course, course_id)
        if course is None:
            raise not_found('Course not found')

        db.delete(course)
        db.commit()

        logger.info('User %s deleted course %s', identity.id, course_id)
        return {'message': 'Course deleted successfully'}
    except SQLAlchemyError as exc:
        db.rollback()
        raise server_error('Delete course failed') from exc


@router.get('/{instructor_id}', response_model=CourseListResponse)
def list_instructor_courses(instructor_id: int, db: Session = Depends(get_db)):
    try:
        instructor = db.get(User, instructor_id)
        if instructor is None:
            raise not_found('Instructor not found')

        courses = db.query(Course).filter(
            Course.instructor_id == instructor_id,
        ).order_by(Course.id.asc()).all()

        return {'courses': courses}
    except SQLAlchemyError as exc:
        raise server_error('Get courses failed') from exc
