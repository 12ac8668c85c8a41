from flask import Blueprint, request, jsonify

from library_app.extensions import db
from library_app.schemas import UserIn, load
from library_app.services.user_service import UserService
from library_app.utils.request_args import positive_id_arg

user_bp = Blueprint("users", __name__, url_prefix="/api/users")


@user_bp.get("")
def get_user():
    user_id = positive_id_arg("id", "user ID")
    u = UserService.get_user(db.session, user_id)
    return jsonify({"success": True, "data": u.to_dict()})


@user_bp.get("/all")
def list_users():
    users = UserService.list_users(db.session)
    return jsonify({"success": True, "data": [u.to_dict() for u in users]})


@user_bp.post("")
def create_user():
    data = load(UserIn, request.get_json(silent=True))
    u = UserService.create_user(db.session, data.model_dump())
    resp = jsonify({"success": True, "data": u.to_dict()})
    resp.headers["Location"] = f"/api/users?id={u.id}"
    return resp, 201


@user_bp.put("")
def update_user():
    user_id = positive_id_arg("id", "user ID")
    data = load(UserIn, request.get_json(silent=True))
    u = UserService.update_user(db.session, user_id, data.model_dump())
    return jsonify({"success": True, "data": u.to_dict()})


@user_bp.delete("")
def delete_user():
    user_id = positive_id_arg("id", "user ID")
    UserService.delete_user(db.session, user_id)
    return jsonify({"success": True, "message": f"Successfully deleted user with id={user_id}"})
