# blogdesk/routes/auth.py
from flask import Blueprint, jsonify

from blogdesk.auth.tokens import get_token_service
from blogdesk.services.accounts import register_user, authenticate
from blogdesk.utils.validation import json_body

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()
    register_user(data)
    return jsonify({"message": "User registered successfully!"}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    user = authenticate(data.get("email"), data.get("password"))

    token = get_token_service().issue(user)
    return jsonify({"message": "Login successful", "token": token}), 200
