from flask import Blueprint, jsonify, g

from blogdesk.auth.decorators import jwt_required, permission_required
from blogdesk.services import blogs
from blogdesk.utils.validation import json_body, parse_id

blog_bp = Blueprint("blogs", __name__)


# 🟢 Crear blog (solo Admin)
@blog_bp.route("", methods=["POST"])
@jwt_required
@permission_required("create_blog")
def create_blog():
    data = json_body()
    blog = blogs.create_blog(data)
    return jsonify({"message": "Blog created successfully", "blog": blog.to_dict()}), 201


# 🟠 Asignar editor (solo Admin, una única vez)
@blog_bp.route("/<int:id>/assign", methods=["PUT"])
@jwt_required
@permission_required("assign_blog")
def assign_blog(id):
    data = json_body()
    editor_id = parse_id(data.get("editorId"), "editorId")
    blog = blogs.assign_editor(id, editor_id)
    return jsonify({"message": "Blog assigned successfully", "blog": blog.to_dict()}), 200


# 🟡 Editar blog (solo el Editor asignado, actualización parcial)
@blog_bp.route("/<int:id>", methods=["PUT"])
@jwt_required
@permission_required("edit_blog")
def edit_blog(id):
    data = json_body()
    blog = blogs.edit_blog(id, g.current_user["id"], data)
    return jsonify({"message": "Blog updated successfully", "blog": blog.to_dict()}), 200


# 🟣 Listar blogs (cualquier usuario autenticado)
@blog_bp.route("", methods=["GET"])
@jwt_required
@permission_required("list_blogs")
def get_blogs():
    return jsonify({"blogs": [b.to_dict() for b in blogs.list_blogs()]}), 200


# 🔵 Ver un solo blog
@blog_bp.route("/<int:id>", methods=["GET"])
@jwt_required
@permission_required("view_blog")
def get_blog_detail(id):
    return jsonify({"blog": blogs.get_blog(id).to_dict()}), 200
