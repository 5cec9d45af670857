"""Error taxonomy and its translation into JSON error responses.

Services raise ``CatalogError`` subclasses; the handlers registered by
``register_error_handlers`` turn every exception that escapes a view into a
body of the form ``{code, message, timestamp}``.
"""
import logging
from datetime import datetime

from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException, NotFound

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    status = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ResourceNotFound(CatalogError):
    status = 404
    code = "RESOURCE_NOT_FOUND"

    def __init__(self, message, resource=None, field=None, value=None):
        super().__init__(message)
        self.resource = resource
        self.field = field
        self.value = value

    @classmethod
    def for_resource(cls, resource, field, value):
        return cls(f"{resource} with {field} '{value}' not found", resource, field, value)

    @classmethod
    def for_film(cls, film_id):
        return cls.for_resource("Film", "ID", film_id)

    @classmethod
    def for_actor(cls, actor_id):
        return cls.for_resource("Actor", "ID", actor_id)

    @classmethod
    def for_multiple(cls, resource, missing_ids):
        ids = ", ".join(str(i) for i in sorted(missing_ids))
        return cls(f"{len(missing_ids)} {resource.lower()}(s) not found: {ids}", resource, "ID", missing_ids)

    @classmethod
    def for_relationship(cls, first, first_id, second, second_id):
        return cls(f"Relationship between {first} (ID: {first_id}) and {second} (ID: {second_id}) not found")


class InvalidArgument(CatalogError):
    status = 400
    code = "INVALID_ARGUMENT"


class DuplicateResource(InvalidArgument):
    pass


class TypeMismatch(CatalogError):
    status = 400
    code = "TYPE_MISMATCH"

    def __init__(self, parameter, value, expected="integer"):
        super().__init__(f"Invalid value '{value}' for parameter '{parameter}'. Expected type: {expected}")
        self.parameter = parameter
        self.value = value


class InvalidJson(CatalogError):
    status = 400
    code = "INVALID_JSON"


def error_body(code, message, **extra):
    return {
        "code": code,
        "message": message,
        "timestamp": datetime.now().isoformat(),
        **extra
    }


def field_errors(err):
    """Flatten marshmallow's nested ``messages`` into a list of per-field errors."""
    data = err.data if isinstance(err.data, dict) else {}
    errors = []
    for field, messages in err.messages.items():
        if isinstance(messages, dict):
            # list fields report {index: [messages]}
            messages = [m for sub in messages.values() for m in (sub if isinstance(sub, list) else [sub])]
        elif not isinstance(messages, list):
            messages = [messages]
        rejected = data.get(field)
        for message in messages:
            errors.append({
                "field": field,
                "message": message,
                "rejectedValue": None if rejected is None else str(rejected)
            })
    return errors


def handle_catalog_error(err):
    if err.status >= 500:
        logger.error("%s: %s", err.code, err.message)
    else:
        logger.warning("%s: %s", err.code, err.message)
    return error_body(err.code, err.message), err.status


def handle_validation_error(err):
    logger.warning("Validation failed: %s", err.messages)
    return error_body(
        "VALIDATION_ERROR",
        "Request data failed validation",
        fieldErrors=field_errors(err)
    ), 400


def handle_integrity_error(err):
    logger.error("Data integrity violation: %s", err.orig)
    return error_body(
        "DATA_INTEGRITY_ERROR",
        "The operation violates a database constraint. "
        "The record may already exist or still be referenced elsewhere."
    ), 409


def handle_http_exception(err):
    if isinstance(err, NotFound):
        logger.warning("Endpoint not found: %s", err.description)
        return error_body("ENDPOINT_NOT_FOUND", "The requested endpoint was not found"), 404
    return error_body(err.name.upper().replace(" ", "_"), err.description), err.code


def handle_unexpected_error(err):
    logger.exception("Unexpected error occurred")
    return error_body(
        "INTERNAL_ERROR",
        "An unexpected error occurred. Please contact the administrator."
    ), 500


def register_error_handlers(app):
    app.register_error_handler(CatalogError, handle_catalog_error)
    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(IntegrityError, handle_integrity_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected_error)
