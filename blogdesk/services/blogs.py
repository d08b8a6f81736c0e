"""
Ciclo de vida de los blogs: creación, asignación de editor, edición y listado.

La asignación y la edición se hacen con un UPDATE condicional único, de modo
que la fila en la base de datos es el único punto de serialización:
  - asignar:  UPDATE ... WHERE id = ? AND assigned_editor_id IS NULL
  - editar:   UPDATE ... WHERE id = ? AND assigned_editor_id = <editor>
"""

from datetime import datetime

from blogdesk.extensions import db
from blogdesk.models import Blog, User
from blogdesk.errors import NotFound, AlreadyAssigned, ValidationError
from blogdesk.logging_config import get_logger
from blogdesk.utils.permissions import ROLE_EDITOR
from blogdesk.utils.validation import require_fields, optional_text

logger = get_logger(__name__)


def create_blog(data):
    require_fields(data, ["title", "content"])

    blog = Blog(title=data["title"], content=data["content"])
    db.session.add(blog)
    db.session.commit()

    logger.info(f"Blog {blog.id} created")
    return blog


def assign_editor(blog_id, editor_id):
    blog = db.session.get(Blog, blog_id)
    if not blog:
        raise NotFound("Blog not found")

    # Un blog ya asignado se rechaza antes de mirar al editor pedido
    if blog.assigned_editor_id is not None:
        logger.info(f"Blog {blog_id} already assigned, editor {editor_id} rejected")
        raise AlreadyAssigned()

    editor = db.session.get(User, editor_id)
    if not editor:
        raise NotFound("Editor not found")
    if editor.role != ROLE_EDITOR:
        raise ValidationError(f"User {editor.id} is not an Editor")

    # Solo se asigna si sigue sin editor: una asignación previa nunca se pisa
    updated = Blog.query.filter(
        Blog.id == blog_id,
        Blog.assigned_editor_id.is_(None),
    ).update(
        {"assigned_editor_id": editor.id, "updated_at": datetime.utcnow()},
        synchronize_session=False,
    )
    if not updated:
        db.session.rollback()
        logger.info(f"Blog {blog_id} already assigned, editor {editor_id} rejected")
        raise AlreadyAssigned()

    db.session.commit()
    logger.info(f"Blog {blog_id} assigned to editor {editor.id}")
    return db.session.get(Blog, blog_id)


def edit_blog(blog_id, editor_id, data):
    # Un título o contenido vacío significa "sin cambios", no "borrar"
    changes = {}
    title = optional_text(data, "title")
    content = optional_text(data, "content")
    if title:
        changes["title"] = title
    if content:
        changes["content"] = content

    # Búsqueda acotada por id Y editor asignado: un editor ajeno recibe 404,
    # igual que si el blog no existiera
    scoped = Blog.query.filter(
        Blog.id == blog_id,
        Blog.assigned_editor_id == editor_id,
    )

    if changes:
        changes["updated_at"] = datetime.utcnow()
        updated = scoped.update(changes, synchronize_session=False)
        if not updated:
            db.session.rollback()
            raise NotFound("Blog not found or not assigned to you")
        db.session.commit()
        logger.info(f"Blog {blog_id} edited by editor {editor_id}: {', '.join(sorted(changes))}")

    blog = scoped.first()
    if not blog:
        raise NotFound("Blog not found or not assigned to you")
    return blog


def list_blogs():
    return Blog.query.order_by(Blog.id).all()


def get_blog(blog_id):
    blog = db.session.get(Blog, blog_id)
    if not blog:
        raise NotFound("Blog not found")
    return blog
