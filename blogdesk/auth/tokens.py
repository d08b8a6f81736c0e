# blogdesk/auth/tokens.py
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from blogdesk.errors import InvalidToken
from blogdesk.logging_config import get_logger

logger = get_logger(__name__)


class TokenService:
    """Emite y verifica JWT firmados con secreto compartido que llevan {id, role}."""

    def __init__(self, secret_key, expires_in=3600, algorithm="HS256"):
        if not secret_key:
            raise ValueError("JWT secret key is required")
        self.secret_key = secret_key
        self.expires_in = int(expires_in)
        self.algorithm = algorithm

    @classmethod
    def from_config(cls, config):
        return cls(
            secret_key=config["JWT_SECRET_KEY"],
            expires_in=config.get("JWT_EXPIRES_IN", 3600),
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
        )

    def issue(self, user):
        now = datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "role": user.role,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token):
        """Devuelve la identidad {id, role} o lanza InvalidToken"""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {e}")
            raise InvalidToken("Invalid token")

        if "id" not in payload or "role" not in payload:
            raise InvalidToken("Invalid token")

        return {"id": payload["id"], "role": payload["role"]}


def get_token_service():
    return current_app.extensions["token_service"]
