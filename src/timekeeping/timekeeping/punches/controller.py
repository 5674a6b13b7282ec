from __future__ import annotations

from flask import Flask, jsonify, request

from ..accounting.aggregator import aggregate_day
from ..api.errors import api_errors
from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_bool, require_positive_int
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    def _require_employee(employee_id: int) -> None:
        if not container.employees_repo.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

    def _date_arg(name: str):
        value = request.args.get(name)
        return parse_iso_date(value) if value else now_local().date()

    @app.route("/api/punches", methods=["POST"], endpoint="api_record_punch")
    @api_errors
    def api_record_punch():
        data = request.get_json(silent=True) or {}
        event = container.punch_service.record_punch(
            require_positive_int(data.get("employee_id"), "employee_id"),
            data.get("kind"),
            location_present=require_bool(data.get("location_present", False), "location_present"),
        )
        return jsonify({"success": True, "event": event.to_dict()}), 201

    @app.route("/api/employees/<int:employee_id>/actions", methods=["GET"], endpoint="api_punch_actions")
    @api_errors
    def api_punch_actions(employee_id: int):
        _require_employee(employee_id)
        on_date = _date_arg("date")
        actions = container.punch_service.available_actions(employee_id, on_date)
        return jsonify(
            {
                "employee_id": employee_id,
                "date": on_date.isoformat(),
                "actions": sorted(k.value for k in actions),
            }
        )

    @app.route("/api/employees/<int:employee_id>/day", methods=["GET"], endpoint="api_daily_record")
    @api_errors
    def api_daily_record(employee_id: int):
        _require_employee(employee_id)
        on_date = _date_arg("date")
        records = container.period_aggregator.daily_records(employee_id, on_date, on_date)
        record = records[0] if records else aggregate_day([], employee_id=employee_id, calendar_date=on_date)
        return jsonify(record.to_dict())
