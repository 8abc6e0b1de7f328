"""Authentication error constants.

Returned as Failure values by the token service and by the request
authentication dependency. Never raised as exceptions.

Usage:
    from src.domain.errors import AuthenticationError

    match token_service.validate_refresh_token(token):
        case Success(value=payload):
            ...
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Error Categories:
        - Token errors: INVALID_TOKEN, EXPIRED_TOKEN, WRONG_TOKEN_TYPE
        - Credential errors: INVALID_CREDENTIALS
        - Access errors: MISSING_CREDENTIALS, INSUFFICIENT_PERMISSIONS
    """

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    WRONG_TOKEN_TYPE = "Wrong token type"

    INVALID_CREDENTIALS = "Invalid email/username or password"

    MISSING_CREDENTIALS = "Not authenticated"
    INSUFFICIENT_PERMISSIONS = "Insufficient permissions"
