from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..api.errors import api_errors
from ..common.datetime_utils import now_local
from ..container import Container
from ..core.constants import REPORT_FILTER_ALL
from .export import report_to_csv, report_to_xlsx

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _build_rows():
        month = request.args.get("month") or now_local().strftime("%Y-%m")
        employee = request.args.get("employee") or REPORT_FILTER_ALL
        rows = container.report_service.monthly_report(employee_filter=employee, year_month=month)
        return month, employee, rows

    @app.route("/api/reports", methods=["GET"], endpoint="api_report")
    @api_errors
    def api_report():
        month, employee, rows = _build_rows()
        return jsonify({"month": month, "employee": employee, "rows": [r.to_dict() for r in rows]})

    @app.route("/api/reports.csv", methods=["GET"], endpoint="api_report_csv")
    @api_errors
    def api_report_csv():
        month, employee, rows = _build_rows()
        filename = f"timesheet_{employee}_{month}.csv"
        return app.response_class(
            report_to_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports.xlsx", methods=["GET"], endpoint="api_report_xlsx")
    @api_errors
    def api_report_xlsx():
        month, employee, rows = _build_rows()
        return send_file(
            report_to_xlsx(rows),
            download_name=f"timesheet_{employee}_{month}.xlsx",
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )
