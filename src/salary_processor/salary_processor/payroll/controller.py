from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_int
from ..core.exceptions import ResultNotFoundError, SpreadsheetReadError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    processing = container.processing_service
    working_days = container.salary_service.working_days
    directory = container.employee_directory

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"status": "error", "message": str(exc)}), 400

    @app.errorhandler(SpreadsheetReadError)
    def handle_spreadsheet_error(exc: SpreadsheetReadError):
        logger.error("Unreadable spreadsheet: %s", exc)
        return jsonify({"status": "error", "message": str(exc)}), 400

    @app.errorhandler(ResultNotFoundError)
    def handle_missing_result(exc: ResultNotFoundError):
        return jsonify({"status": "error", "message": str(exc)}), 404

    @app.route("/salary/process", methods=["POST"], endpoint="salary_process")
    def process_salary():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("file is required")

        total_days = request.form.get("totalDays") or request.args.get("totalDays")
        days = require_int(total_days, "totalDays") if total_days else None

        logger.info("Processing salary data from file: %s", upload.filename)
        data = upload.read()
        if not data:
            raise ValidationError("file is empty")

        results = processing.process_workbook(data, total_working_days=days)
        payload = {"results": [r.to_dict() for r in results]}
        if not results:
            payload["message"] = "No valid attendance records found in the workbook."
        return jsonify(payload)

    @app.route("/salary/total-days", methods=["GET"], endpoint="salary_total_days")
    def get_total_days():
        return jsonify({"totalWorkingDays": working_days.get()})

    @app.route("/salary/total-days", methods=["POST"], endpoint="salary_set_total_days")
    def set_total_days():
        body = request.get_json(silent=True) or {}
        raw = request.form.get("days") or request.args.get("days") or body.get("days")
        value = working_days.set(require_int(raw, "days"))
        return jsonify({"status": "success", "totalWorkingDays": value})

    @app.route("/salary/results/<employee_id>", methods=["GET"], endpoint="salary_result")
    def get_result(employee_id: str):
        return jsonify(processing.get_result(employee_id).to_dict())

    @app.route("/salary/employees", methods=["GET"], endpoint="salary_employees")
    def list_employees():
        return jsonify([e.to_dict() for e in directory.list_employees()])

    @app.route("/salary/employees/<employee_id>", methods=["GET"], endpoint="salary_employee")
    def get_employee(employee_id: str):
        return jsonify(directory.get_employee(employee_id).to_dict())

    @app.route("/salary/employees/refresh", methods=["POST"], endpoint="salary_employees_refresh")
    def refresh_employees():
        count = directory.refresh()
        return jsonify({"status": "success", "employeeCount": count})
