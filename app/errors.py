# app/errors.py
"""
Service-level error taxonomy.

Services raise these explicitly; app.main maps them onto HTTP responses.
Anything else escaping a service is logged with its operation context and
surfaced as a generic InternalError so internals never reach a response body.
"""

import logging
from contextlib import contextmanager


class ServiceError(Exception):
    """Base class for failures a service reports on purpose."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(ServiceError):
    """Input passed schema validation but is still unacceptable."""

    status_code = 400


class UnauthorizedError(ServiceError):
    """Bad credentials, missing or invalid token."""

    status_code = 401


class ForbiddenError(ServiceError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    """Duplicate value, redundant transition or already-deleted resource."""

    status_code = 409


class InternalError(ServiceError):
    status_code = 500


@contextmanager
def service_operation(logger: logging.Logger, context: str):
    """
    Wrap a service operation.

    ServiceErrors pass through unchanged. Unexpected exceptions are logged
    with the operation context and re-raised as InternalError.

    Usage:
        with service_operation(logger, "create post"):
            ...
    """
    try:
        yield
    except ServiceError as e:
        logger.warning(f"[{context}] {type(e).__name__}: {e.message}")
        raise
    except Exception as e:
        logger.error(f"[{context}] failed: {e}", exc_info=True)
        raise InternalError(f"{context} failed") from e
