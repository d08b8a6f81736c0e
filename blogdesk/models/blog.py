from datetime import datetime
from blogdesk.extensions import db


# blogdesk/models/blog.py
class Blog(db.Model):
    __tablename__ = "blogs"

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)

    # Editor asignado: se fija una sola vez (ver services.blogs.assign_editor)
    assigned_editor_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True, index=True)
    assigned_editor = db.relationship("User", lazy="joined")

    # Comentarios embebidos: el blog es su único dueño
    comments = db.relationship(
        "Comment",
        back_populates="blog",
        order_by="Comment.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "assignedEditor": self.assigned_editor.to_summary() if self.assigned_editor else None,
            "comments": [c.to_dict() for c in self.comments],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Blog {self.title}>"


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.Integer, primary_key=True)
    blog_id = db.Column(db.Integer, db.ForeignKey("blogs.id"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    blog = db.relationship("Blog", back_populates="comments")

    def to_dict(self):
        return {
            "id": self.id,
            "user": self.user_id,
            "content": self.content,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Comment {self.id} on blog {self.blog_id}>"
