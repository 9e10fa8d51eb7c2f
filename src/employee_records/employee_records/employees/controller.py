from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .serializers import to_json

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    """Mount the JSON API on ``app``.

    ``container`` only needs ``employee_service`` and ``auth_service``.
    """

    def _body() -> dict[str, Any]:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object.")
        return data

    def _message(message: str, status: int):
        return jsonify({"message": message}), status

    def _internal_error(where: str, e: Exception):
        logger.exception("Error in %s %s", request.method, where)
        return jsonify({"message": "Internal server error", "error": str(e)}), 500

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "OK", "message": "Server is running"}), 200

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    def list_users():
        try:
            return jsonify(to_json(container.employee_service.list_all()))
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception as e:
            return _internal_error("/api/users", e)

    @app.route("/api/users/<user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: str):
        try:
            return jsonify(to_json(container.employee_service.get(user_id)))
        except NotFoundError as e:
            return _message(str(e), 404)
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception as e:
            return _internal_error("/api/users/:userId", e)

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    def create_user():
        try:
            created = container.employee_service.register(_body())
            return jsonify(to_json(created)), 201
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception as e:
            logger.exception("Error saving user")
            return _message(f"Failed to create user: {e}", 500)

    @app.route("/api/users/<user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: str):
        try:
            updated = container.employee_service.update(user_id, _body())
            return jsonify(to_json(updated))
        except NotFoundError:
            return _message("User not found for update.", 404)
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception as e:
            logger.exception("Error updating user")
            return _message(f"Failed to update user: {e}", 500)

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: str):
        try:
            container.employee_service.delete(user_id)
            return _message("User deleted", 200)
        except NotFoundError as e:
            return _message(str(e), 404)
        except ValidationError as e:
            return _message(str(e), 400)
        except Exception as e:
            return _internal_error("/api/users/:userId", e)

    def _login(role: Role):
        try:
            data = _body()
            user = container.auth_service.authenticate(data.get("userId"), data.get("password"), role=role)
            return jsonify(
                {
                    "message": f"{role.value.capitalize()} login successful",
                    "userId": user["userId"],
                    "user": to_json(user),
                }
            )
        except (AuthenticationError, ValidationError):
            return _message(f"Invalid {role.value} credentials", 401)
        except Exception as e:
            return _internal_error(f"/api/{role.value}/login", e)

    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        return _login(Role.ADMIN)

    @app.route("/api/employee/login", methods=["POST"], endpoint="employee_login")
    def employee_login():
        return _login(Role.EMPLOYEE)

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_users")
    def admin_users():
        try:
            return jsonify(to_json(container.employee_service.list_employees()))
        except NotFoundError as e:
            return _message(str(e), 404)
        except Exception as e:
            return _internal_error("/api/admin/users", e)
