from flask import Blueprint, jsonify, g

from blogdesk.auth.decorators import jwt_required, permission_required
from blogdesk.services import comments
from blogdesk.utils.validation import json_body

comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/<int:id>/comments", methods=["POST"])
@jwt_required
@permission_required("add_comment")
def add_comment(id):
    data = json_body()
    blog = comments.add_comment(id, g.current_user["id"], data)
    return jsonify({"message": "Comment added successfully", "blog": blog.to_dict()}), 200


# 🔴 Borrar comentario (solo su autor)
@comment_bp.route("/<int:blog_id>/comments/<int:comment_id>", methods=["DELETE"])
@jwt_required
@permission_required("delete_comment")
def delete_comment(blog_id, comment_id):
    blog = comments.delete_comment(blog_id, comment_id, g.current_user["id"])
    return jsonify({"message": "Comment deleted successfully", "blog": blog.to_dict()}), 200
