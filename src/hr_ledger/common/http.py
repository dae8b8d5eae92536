from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import current_app, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError


def json_api(view):
    """Map domain errors to JSON responses; log anything unexpected."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
            if bool(current_app.config.get("DEBUG", False)):
                raise
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper


def payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def ok(data: Any = None, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def arg_year(default: int) -> int:
    value = request.args.get("year")
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Invalid year: {value!r}")


def arg_int(name: str) -> Optional[int]:
    value = request.args.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Invalid {name}: {value!r}")
