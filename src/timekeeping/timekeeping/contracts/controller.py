from __future__ import annotations

from flask import Flask, jsonify, request

from ..api.errors import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/contract", methods=["GET"], endpoint="api_get_contract")
    @api_errors
    def api_get_contract(employee_id: int):
        contract = container.contract_service.get_contract(employee_id)
        return jsonify({"employee_id": employee_id, **contract.to_dict()})

    @app.route("/api/employees/<int:employee_id>/contract", methods=["PUT"], endpoint="api_set_contract")
    @api_errors
    def api_set_contract(employee_id: int):
        data = request.get_json(silent=True) or {}
        contract = container.contract_service.set_contract(
            employee_id,
            hours_per_period=data.get("hours_per_period"),
            period_kind=data.get("period_kind"),
        )
        return jsonify({"success": True, "employee_id": employee_id, **contract.to_dict()})
