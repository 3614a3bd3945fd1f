from core.imports import request, get_jwt, get_jwt_identity
from core.extensions import jwt
from core.errors import AuthError, ErrorMessage


def _reject(message):
    return AuthError(message, status_code=401).to_response()


@jwt.unauthorized_loader
def missing_token(reason):
    # a header that exists but isn't "Bearer <token>" counts as a bad token
    if request.headers.get("Authorization"):
        return _reject(ErrorMessage.INVALID_TOKEN)
    return _reject(ErrorMessage.NO_TOKEN)


@jwt.invalid_token_loader
def invalid_token(reason):
    return _reject(ErrorMessage.INVALID_TOKEN)


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return _reject(ErrorMessage.INVALID_TOKEN)


def current_identity():
    """Identity claims of the verified bearer token, as ``{"id", "email"}``."""
    claims = get_jwt()
    return {"id": get_jwt_identity(), "email": claims.get("email")}
