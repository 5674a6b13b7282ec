from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(view):
    """Translate domain errors of a JSON endpoint into HTTP responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error("Internal server error", 500)

    return wrapper


def not_applicable(employee_id: int):
    """Body for balances of employees without a contract."""

    return jsonify({"employee_id": employee_id, "applicable": False})
