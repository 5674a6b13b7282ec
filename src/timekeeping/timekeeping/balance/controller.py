from __future__ import annotations

from flask import Flask, jsonify, request

from ..api.errors import api_errors, not_applicable
from ..common.datetime_utils import now_local, parse_iso_date
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    def _require_employee(employee_id: int) -> None:
        if not container.employees_repo.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

    def _as_of():
        value = request.args.get("as_of")
        return parse_iso_date(value) if value else now_local().date()

    @app.route("/api/employees/<int:employee_id>/progress", methods=["GET"], endpoint="api_period_progress")
    @api_errors
    def api_period_progress(employee_id: int):
        _require_employee(employee_id)
        progress = container.balance_engine.current_period_progress(employee_id, _as_of())
        if progress is None:
            return not_applicable(employee_id)
        return jsonify({"applicable": True, **progress.to_dict()})

    @app.route("/api/employees/<int:employee_id>/balance", methods=["GET"], endpoint="api_annual_balance")
    @api_errors
    def api_annual_balance(employee_id: int):
        _require_employee(employee_id)
        balance = container.balance_engine.annual_balance(employee_id, _as_of())
        if balance is None:
            return not_applicable(employee_id)
        return jsonify({"applicable": True, **balance.to_dict()})

    @app.route("/api/balances", methods=["GET"], endpoint="api_team_balances")
    @api_errors
    def api_team_balances():
        as_of = _as_of()
        summary = container.balance_engine.team_annual_summary(container.employees_repo.list_all(), as_of)
        return jsonify({"as_of": as_of.isoformat(), "balances": [b.to_dict() for b in summary]})
