from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_date_range, require_positive_id
from ..container import Container
from ..core.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger("timekeeping.http")


def register(app: Flask, container: Container) -> None:
    service = container.daily_calculation_service

    def tenant_id() -> int:
        return require_positive_id(request.headers.get("X-Tenant-ID"), "X-Tenant-ID")

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"error": {"code": "validation_error", "message": str(exc)}}), 400

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(exc: ConfigurationError):
        logger.warning("day_plan_configuration_error", extra={"path": request.path, "detail": str(exc)})
        return jsonify({"error": {"code": "configuration_error", "message": str(exc)}}), 400

    @app.route(
        "/api/employees/<int:employee_id>/daily-values/<work_date>/calculate",
        methods=["POST"],
        endpoint="calculate_daily_value",
    )
    def calculate_daily_value(employee_id: int, work_date: str):
        value = service.calculate_day(tenant_id(), employee_id, parse_iso_date(work_date))
        if value is None:
            return "", 204
        return jsonify(value.to_dict())

    @app.route(
        "/api/employees/<int:employee_id>/daily-values/recalculate",
        methods=["POST"],
        endpoint="recalculate_daily_values",
    )
    def recalculate_daily_values(employee_id: int):
        tenant = tenant_id()
        payload = request.get_json(silent=True) or {}
        start = parse_iso_date(payload.get("from"))
        end = parse_iso_date(payload.get("to"))
        require_date_range(start, end, max_days=container.max_recalc_days)

        count = service.recalculate_range(tenant, employee_id, start, end)
        logger.info(
            "daily_recalc_requested",
            extra={"tenant_id": tenant, "employee_id": employee_id, "from": start.isoformat(), "to": end.isoformat()},
        )
        return jsonify({"employee_id": employee_id, "from": start.isoformat(), "to": end.isoformat(), "count": count})

    @app.route(
        "/api/employees/<int:employee_id>/daily-values/<work_date>",
        methods=["GET"],
        endpoint="get_daily_value",
    )
    def get_daily_value(employee_id: int, work_date: str):
        tenant_id()
        value = service.get_daily_value(employee_id, parse_iso_date(work_date))
        if value is None:
            return jsonify({"error": {"code": "not_found", "message": "Chưa có kết quả tính cho ngày này"}}), 404
        return jsonify(value.to_dict())
