from core.imports import Enum, wraps, jsonify, current_app
from core.extensions import db


class ErrorMessage(str, Enum):
    CREDENTIALS_REQUIRED = "Email and password required"
    EMAIL_TAKEN = "Email already registered"
    INVALID_CREDENTIALS = "Invalid credentials"
    NO_TOKEN = "No token"
    INVALID_TOKEN = "Invalid token"
    USER_NOT_FOUND = "User not found"
    SERVER_ERROR = "Server error"


class AccountError(Exception):
    """Base for errors that are reported to the client as ``{"error": ...}``."""

    status_code = 500
    default_message = ErrorMessage.SERVER_ERROR

    def __init__(self, message=None, status_code=None):
        self.message = ErrorMessage(message or self.default_message)
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message.value)

    def to_response(self):
        return jsonify({"error": self.message.value}), self.status_code


class ValidationError(AccountError):
    status_code = 400
    default_message = ErrorMessage.CREDENTIALS_REQUIRED


class ConflictError(AccountError):
    status_code = 400
    default_message = ErrorMessage.EMAIL_TAKEN


class AuthError(AccountError):
    # 400 for bad credentials; the session guard raises it with 401
    status_code = 400
    default_message = ErrorMessage.INVALID_CREDENTIALS


class NotFoundError(AccountError):
    status_code = 404
    default_message = ErrorMessage.USER_NOT_FOUND


class InternalError(AccountError):
    status_code = 500
    default_message = ErrorMessage.SERVER_ERROR


def json_errors(view):
    """Convert everything a view raises into a JSON error response.

    Known account errors keep their status code; anything else rolls back
    the session, gets logged and becomes a generic 500.
    """
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except AccountError as e:
            return e.to_response()
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Unhandled error in %s", view.__name__)
            return InternalError().to_response()
    return wrapper
