from flask import request

from blogdesk.errors import ValidationError


def json_body():
    """Cuerpo JSON de la request como dict; sin cuerpo equivale a {}"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_fields(data, fields):
    """Lanza ValidationError si falta alguno de los campos (o viene vacío)"""
    missing = [f for f in fields if not data.get(f)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    not_text = [f for f in fields if not isinstance(data[f], str)]
    if not_text:
        raise ValidationError(f"Fields must be strings: {', '.join(not_text)}")


def optional_text(data, field):
    """Valor de texto opcional; None si no viene o viene vacío"""
    value = data.get(field)
    if not value:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"'{field}' must be a string")
    return value


def parse_id(value, field):
    # bool es subclase de int, no lo aceptamos como id
    if value is None or isinstance(value, bool):
        raise ValidationError(f"'{field}' must be an integer id")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"'{field}' must be an integer id")
