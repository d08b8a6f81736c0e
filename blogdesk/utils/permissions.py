# Roles disponibles
ROLE_ADMIN = "Admin"
ROLE_EDITOR = "Editor"
ROLE_USER = "User"

ROLES = (ROLE_ADMIN, ROLE_EDITOR, ROLE_USER)

# Reglas por operación: conjunto de roles permitidos.
# Modelo plano, sin jerarquía: un Admin NO hereda permisos de Editor.
OPERATION_ROLES = {
    "create_blog": {ROLE_ADMIN},
    "assign_blog": {ROLE_ADMIN},
    "edit_blog": {ROLE_EDITOR},
    "list_blogs": set(ROLES),
    "view_blog": set(ROLES),
    "add_comment": set(ROLES),
    "delete_comment": set(ROLES),
}


def is_valid_role(role):
    return role in ROLES


def get_allowed_roles(operation):
    """Devuelve los roles permitidos para una operación"""
    if operation not in OPERATION_ROLES:
        raise KeyError(f"Operación desconocida: {operation}")
    return OPERATION_ROLES[operation]


def can_perform(identity, operation):
    return bool(identity) and identity.get("role") in get_allowed_roles(operation)
