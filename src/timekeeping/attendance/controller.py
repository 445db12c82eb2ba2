from __future__ import annotations

import logging
from dataclasses import asdict
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.constants import DEFAULT_DEVICE, DEFAULT_LOCATION
from ..core.enums import PeriodLevel
from ..core.exceptions import NotFoundError, ValidationError
from .serializers import computed_to_dict, parse_device, parse_event_type, status_to_dict

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    time_tracking = container.time_tracking_service
    reports = container.payroll_report_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except Exception:
                logger.exception("Time tracking request failed", extra={"path": request.path})
                return jsonify({"success": False, "message": "Internal error"}), 500

        return wrapper

    @app.route("/api/time-tracking/<action>", methods=["POST"], endpoint="time_tracking_clock")
    @json_errors
    def clock(action: str):
        """Append one clock event (clock-in, clock-out, break-start, break-end) for today."""
        event_type = parse_event_type(action)
        data = request.get_json(silent=True) or {}

        record = time_tracking.record_event(
            str(data.get("employee_id") or ""),
            event_type,
            device=parse_device(data.get("device") or DEFAULT_DEVICE.value),
            location=str(data.get("location") or DEFAULT_LOCATION),
        )
        return jsonify({"success": True, "record": computed_to_dict(record)}), 201

    @app.route("/api/time-tracking/records", methods=["GET"], endpoint="time_tracking_records")
    @json_errors
    def records():
        employee_id = request.args.get("employee_id") or None
        rows = time_tracking.computed_records(employee_id)
        if request.args.get("date"):
            on = parse_iso_date(request.args["date"])
            rows = [r for r in rows if r.date == on]
        return jsonify({"success": True, "records": [computed_to_dict(r) for r in rows]})

    @app.route("/api/time-tracking/records/<record_id>", methods=["DELETE"], endpoint="time_tracking_delete_record")
    @json_errors
    def delete_record(record_id: str):
        time_tracking.delete_record(record_id)
        return jsonify({"success": True})

    @app.route(
        "/api/time-tracking/records/<record_id>/events/<event_id>",
        methods=["DELETE"],
        endpoint="time_tracking_delete_event",
    )
    @json_errors
    def delete_event(record_id: str, event_id: str):
        remaining = time_tracking.delete_event(record_id, event_id)
        return jsonify({"success": True, "record": computed_to_dict(remaining) if remaining else None})

    @app.route("/api/time-tracking/status/<employee_id>", methods=["GET"], endpoint="time_tracking_status")
    @json_errors
    def status(employee_id: str):
        return jsonify({"success": True, "status": status_to_dict(time_tracking.status(employee_id))})

    @app.route("/api/time-tracking/summary/<employee_id>", methods=["GET"], endpoint="time_tracking_summary")
    @json_errors
    def summary(employee_id: str):
        return jsonify({"success": True, "summary": asdict(reports.build_employee_summary(employee_id))})

    @app.route("/api/time-tracking/aggregations", methods=["GET"], endpoint="time_tracking_aggregations")
    @json_errors
    def aggregations():
        return jsonify({"success": True, "aggregations": [asdict(a) for a in reports.build_aggregations()]})

    @app.route("/api/time-tracking/export.xlsx", methods=["GET"], endpoint="time_tracking_export_xlsx")
    @json_errors
    def export_xlsx():
        level_s = request.args.get("level") or PeriodLevel.MONTHLY.value
        try:
            level = PeriodLevel(level_s)
        except ValueError as e:
            raise ValidationError(f"Unknown level: {level_s!r}") from e

        return app.response_class(
            reports.build_export_xlsx(level),
            mimetype=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="arbeitszeit_{level.value}.xlsx"'},
        )
