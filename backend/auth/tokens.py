# backend/auth/tokens.py

from flask_jwt_extended import create_access_token, get_jwt_identity

from errors import ErrorKind, status_only


def issue_token(user_id: int) -> str:
    return create_access_token(identity=str(user_id))


def current_user_id() -> int:
    """Id carried by the token verified for this request."""
    return int(get_jwt_identity())


def register_token_handlers(jwt):
    """
    Every way a token can fail (absent, malformed, bad signature, expired)
    answers the same bare 401.
    """

    unauthorized = ErrorKind.AUTHENTICATION.status

    @jwt.unauthorized_loader
    def missing_token(reason):
        return status_only(unauthorized)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return status_only(unauthorized)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return status_only(unauthorized)

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_payload):
        return status_only(unauthorized)

    @jwt.token_verification_failed_loader
    def verification_failed(jwt_header, jwt_payload):
        return status_only(unauthorized)
