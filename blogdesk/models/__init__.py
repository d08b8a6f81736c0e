# blogdesk/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from blogdesk.models import Blog
"""
from .user import User
from .blog import Blog, Comment

__all__ = ["User", "Blog", "Comment"]
