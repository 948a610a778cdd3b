"""Request and response bodies for the course API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from coursehub.models.user import ROLES

MIN_RATING = 1
MAX_RATING = 5


def _required_text(value: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError('Field is required.')
    return normalized


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip()
    return normalized or None


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    role: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _required_text(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Field is required.')
        return value

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = _required_text(value).lower()
        if '@' not in normalized:
            raise ValueError('Email address is invalid.')
        return normalized

    @field_validator('role')
    @classmethod
    def validate_role(cls, value: str) -> str:
        normalized = _required_text(value).lower()
        if normalized not in ROLES:
            raise ValueError(f"Role must be one of: {', '.join(ROLES)}.")
        return normalized


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _required_text(value).lower()

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError('Field is required.')
        return value


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str


class CreateCourseRequest(BaseModel):
    title: str
    description: str | None = None
    instructor_id: int

    @field_validator('title')
    @classmethod
    def validate_title(cls, value: str) -> str:
        return _required_text(value)

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        return _optional_text(value)


class UpdateCourseRequest(BaseModel):
    title: str | None = None
    description: str | None = None

    @field_validator('title', 'description')
    @classmethod
    def validate_text(cls, value: str | None) -> str | None:
        return _optional_text(value)

    @model_validator(mode='after')
    def require_one_field(self) -> 'UpdateCourseRequest':
        if self.title is None and self.description is None:
            raise ValueError('At least one field (title or description) must be provided.')
        return self


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    instructor_id: int


class CourseEnvelope(BaseModel):
    message: str
    course: CourseResponse


class CourseListResponse(BaseModel):
    courses: list[CourseResponse]


class MessageResponse(BaseModel):
    message: str


class EnrollmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: int = Field(alias='courseId')
    user_id: int = Field(alias='userId')


class EnrollmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    course_id: int
    user_id: int


class EnrollmentEnvelope(BaseModel):
    message: str
    enrollment: EnrollmentResponse


class EnrolledCoursesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enrolled_courses: list[CourseResponse] = Field(alias='enrolledCourses')


class SubmitReviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    comment: str | None = None
    user_id: int = Field(alias='userId')

    @field_validator('comment')
    @classmethod
    def validate_comment(cls, value: str | None) -> str | None:
        return _optional_text(value)


class UpdateReviewRequest(BaseModel):
    rating: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    comment: str | None = None

    @field_validator('comment')
    @classmethod
    def validate_comment(cls, value: str | None) -> str | None:
        return _optional_text(value)

    @model_validator(mode='after')
    def require_one_field(self) -> 'UpdateReviewRequest':
        if self.rating is None and self.comment is None:
            raise ValueError('At least one field (rating or comment) must be provided.')
        return self


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    user_id: int
    rating: int
    comment: str | None = None


class ReviewEnvelope(BaseModel):
    message: str
    review: ReviewResponse


class CourseReviewResponse(BaseModel):
    rating: int
    comment: str | None = None
    reviewer_name: str


class CourseReviewListResponse(BaseModel):
    reviews: list[CourseReviewResponse]
