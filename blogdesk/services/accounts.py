"""
Registro y login de usuarios.

Las contraseñas se guardan con bcrypt (sal aleatoria, costo configurable
con BCRYPT_ROUNDS) y nunca se loguean.
"""

import bcrypt
from flask import current_app
from sqlalchemy.exc import IntegrityError

from blogdesk.extensions import db
from blogdesk.models import User
from blogdesk.errors import ValidationError, DuplicateCredential, NotFound, InvalidCredentials
from blogdesk.logging_config import get_logger
from blogdesk.utils.permissions import ROLE_USER, ROLES, is_valid_role
from blogdesk.utils.validation import require_fields

logger = get_logger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # hash corrupto o contraseña de más de 72 bytes
        return False


def register_user(data: dict) -> User:
    require_fields(data, ["username", "email", "password"])

    role = data.get("role") or ROLE_USER
    if not is_valid_role(role):
        raise ValidationError(f"Invalid role '{role}', expected one of: {', '.join(ROLES)}")

    username = data["username"]
    email = data["email"]

    # bcrypt solo admite hasta 72 bytes
    if len(data["password"].encode("utf-8")) > 72:
        raise ValidationError("Password must be at most 72 bytes")

    if User.query.filter_by(username=username).first():
        raise DuplicateCredential("Username already registered")
    if User.query.filter_by(email=email).first():
        raise DuplicateCredential("Email already registered")

    rounds = current_app.config.get("BCRYPT_ROUNDS", 12)
    user = User(
        username=username,
        email=email,
        password=hash_password(data["password"], rounds),
        role=role,
    )

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Carrera entre el chequeo previo y el commit: el índice único manda
        db.session.rollback()
        raise DuplicateCredential()

    logger.info(f"User registered: {user.username} ({user.role})")
    return user


def authenticate(email: str, password: str) -> User:
    if not email or not password:
        raise ValidationError("Email and password required")
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError("Email and password must be strings")

    user = User.query.filter_by(email=email).first()
    if not user:
        raise NotFound("User not found")

    if not verify_password(password, user.password):
        logger.warning(f"Failed login for user {user.id}")
        raise InvalidCredentials()

    logger.info(f"Login successful: {user.username}")
    return user
