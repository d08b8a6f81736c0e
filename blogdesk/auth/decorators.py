# blogdesk/auth/decorators.py
from functools import wraps
from flask import request, g

from blogdesk.auth.tokens import get_token_service
from blogdesk.errors import Unauthenticated, Forbidden
from blogdesk.logging_config import get_logger
from blogdesk.utils.permissions import can_perform, get_allowed_roles

logger = get_logger(__name__)


def _bearer_token():
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    # el esquema de autenticación HTTP no distingue mayúsculas
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def jwt_required(f):
    """Verifica el token Bearer y deja la identidad {id, role} en g.current_user"""
    @wraps(f)
    def decorated(*args, **kwargs):
        token = _bearer_token()
        if not token:
            logger.warning(f"Request without bearer token: {request.method} {request.path}")
            raise Unauthenticated()

        # InvalidToken se propaga al handler de errores
        g.current_user = get_token_service().verify(token)
        return f(*args, **kwargs)
    return decorated


def _current_identity():
    user = getattr(g, "current_user", None)
    if not user:
        # Solo se compone después de jwt_required
        raise Unauthenticated()
    return user


def permission_required(operation):
    # Falla al importar si la operación no existe en OPERATION_ROLES
    get_allowed_roles(operation)

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            user = _current_identity()
            if not can_perform(user, operation):
                logger.warning(
                    f"User {user.get('id')} with role {user.get('role')} denied for '{operation}'"
                )
                raise Forbidden()
            return f(*args, **kwargs)
        return wrapper
    return decorator
