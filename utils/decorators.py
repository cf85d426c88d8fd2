from functools import wraps
from flask import jsonify
from flask_login import current_user


def role_required(required_role):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # 1. Check if user is logged in
            if not current_user.is_authenticated:
                return jsonify({"error": "Login required"}), 401

            # 2. Teachers and students are separate models; each carries its role name
            if getattr(current_user, "role", None) != required_role:
                return jsonify({"error": "Access Denied: You do not have the required role."}), 403

            return func(*args, **kwargs)
        return wrapper
    return decorator
