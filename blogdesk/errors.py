# blogdesk/errors.py
"""
Excepciones de dominio.

Los servicios las lanzan y los handlers registrados en create_app() las
convierten en respuestas JSON {"error": ...} con el status correspondiente.
"""


class APIError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, details=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_dict(self, expose_details=False):
        body = {"error": self.message}
        if expose_details and self.details:
            body["details"] = self.details
        return body


class ValidationError(APIError):
    status_code = 400
    message = "Invalid request data"


class DuplicateCredential(APIError):
    status_code = 400
    message = "Username or email already registered"


class InvalidCredentials(APIError):
    status_code = 400
    message = "Invalid credentials"


class Unauthenticated(APIError):
    status_code = 401
    message = "Access denied"


class InvalidToken(APIError):
    status_code = 400
    message = "Invalid token"


class Forbidden(APIError):
    status_code = 403
    message = "Forbidden: insufficient permissions"


class NotFound(APIError):
    status_code = 404
    message = "Not found"


class AlreadyAssigned(APIError):
    status_code = 400
    message = "Blog already assigned to an editor"


class InternalError(APIError):
    status_code = 500
    message = "Internal server error"
