from datetime import datetime
from blogdesk.extensions import db
from blogdesk.utils.permissions import ROLE_USER


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), nullable=False, unique=True)
    email = db.Column(db.String(120), nullable=False, unique=True)
    password = db.Column(db.String(128), nullable=False)  # hash bcrypt, nunca texto plano

    role = db.Column(db.String(20), nullable=False, default=ROLE_USER)  # 'Admin', 'Editor' o 'User'
    is_verified = db.Column(db.Boolean, nullable=False, default=False)  # sin uso por ahora
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "isVerified": self.is_verified,
        }

    def to_summary(self):
        """Forma reducida usada al expandir el editor asignado de un blog"""
        return {"id": self.id, "username": self.username, "email": self.email}

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
