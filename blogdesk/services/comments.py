from datetime import datetime

from blogdesk.extensions import db
from blogdesk.models import Blog, Comment
from blogdesk.errors import NotFound, Forbidden
from blogdesk.logging_config import get_logger
from blogdesk.utils.validation import require_fields

logger = get_logger(__name__)


def _get_blog_or_404(blog_id):
    blog = db.session.get(Blog, blog_id)
    if not blog:
        raise NotFound("Blog not found")
    return blog


def add_comment(blog_id, user_id, data):
    blog = _get_blog_or_404(blog_id)
    require_fields(data, ["content"])

    blog.comments.append(Comment(
        user_id=user_id,
        content=data["content"],
        created_at=datetime.utcnow(),
    ))
    db.session.commit()

    logger.info(f"User {user_id} commented on blog {blog_id}")
    return blog


def delete_comment(blog_id, comment_id, user_id):
    """Borra un comentario propio; el autor se compara por id, no por texto"""
    blog = _get_blog_or_404(blog_id)

    comment = next((c for c in blog.comments if c.id == comment_id), None)
    if not comment:
        raise NotFound("Comment not found")

    if comment.user_id != user_id:
        logger.warning(f"User {user_id} tried to delete comment {comment_id} owned by {comment.user_id}")
        raise Forbidden("You can only delete your own comments")

    # delete-orphan: quitarlo de la colección lo elimina de la tabla
    blog.comments.remove(comment)
    db.session.commit()

    logger.info(f"Comment {comment_id} deleted from blog {blog_id}")
    return blog
