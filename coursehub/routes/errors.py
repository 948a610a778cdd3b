import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

SERVER_ERROR_DETAIL = 'Server error'


def server_error(context: str) -> HTTPException:
    """Log the exception being handled and build the generic 500 for the client."""
    logger.exception('%s.', context)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR_DETAIL,
    )


def not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
