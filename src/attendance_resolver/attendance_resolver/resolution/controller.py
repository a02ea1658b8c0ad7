from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..attendance.model import AttendanceLog
from ..common.datetime_utils import date_range, days_between, today_civil
from ..common.diagnostics import CollectingSink, logging_sink
from ..common.validators import optional_list, require_mapping, require_non_empty
from ..core.exceptions import DomainError, RangeTooLargeError, ValidationError
from ..leave.model import LeaveRequest
from ..workcalendar.model import Holiday
from ..workcalendar.working_days import count_working_days
from ..container import Container
from .model import ResolveRequest
from .service import summarize

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(e: DomainError, status: int):
        return jsonify({"success": False, "code": e.code, "message": str(e)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error(e, 400)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.error("Domain error while resolving attendance: %s", e)
        return _error(e, 500)

    def _payload() -> dict:
        data = request.get_json(silent=True)
        return dict(require_mapping(data, "request body"))

    def _check_span(start: str, end: str) -> None:
        span = days_between(start, end, tz=container.civil_tz) + 1
        if span > container.max_range_days:
            raise RangeTooLargeError(
                f"Range {start}..{end} spans {span} days, limit is {container.max_range_days}"
            )

    @app.route("/api/attendance/status", methods=["POST"], endpoint="api_attendance_status")
    def api_attendance_status():
        """Resolve a single employee-day from the posted input record."""
        resolve_request = ResolveRequest.from_mapping(_payload())
        sink = CollectingSink(forward=logging_sink)
        result = container.status_resolver.resolve(resolve_request, report=sink)
        return jsonify({
            "success": True,
            "data": result.to_dict(),
            "diagnostics": [d.to_dict() for d in sink.items],
        }), 200

    @app.route("/api/attendance/status/range", methods=["POST"], endpoint="api_attendance_status_range")
    def api_attendance_status_range():
        """Resolve every day of a period for one employee, plus a summary."""
        data = _payload()
        start = require_non_empty(data.get("startDate"), "startDate")
        end = require_non_empty(data.get("endDate"), "endDate")
        _check_span(start, end)

        raw_logs = data.get("attendanceLogs") or {}
        logs = {
            day: AttendanceLog.from_mapping(log)
            for day, log in require_mapping(raw_logs, "attendanceLogs").items()
            if isinstance(log, dict)
        }
        holidays = [Holiday.from_mapping(h) for h in optional_list(data.get("holidays"), "holidays") if isinstance(h, dict)]
        leaves = [
            LeaveRequest.from_mapping(lr)
            for lr in optional_list(data.get("leaveRequests"), "leaveRequests")
            if isinstance(lr, dict)
        ]

        sink = CollectingSink(forward=logging_sink)
        days = container.status_resolver.resolve_range(
            start,
            end,
            logs_by_date=logs,
            holidays=holidays,
            leave_requests=leaves,
            saturday_policy=data.get("saturdayPolicy", container.default_saturday_policy),
            report=sink,
        )
        return jsonify({
            "success": True,
            "data": [d.to_dict() for d in days],
            "summary": summarize(days).to_dict(),
            "diagnostics": [d.to_dict() for d in sink.items],
        }), 200

    @app.route("/api/attendance/date-range", methods=["GET"], endpoint="api_date_range")
    def api_date_range():
        start = require_non_empty(request.args.get("start"), "start")
        end = require_non_empty(request.args.get("end"), "end")
        _check_span(start, end)
        return jsonify({"success": True, "data": list(date_range(start, end, tz=container.civil_tz))}), 200

    @app.route("/api/attendance/working-days", methods=["GET"], endpoint="api_working_days")
    def api_working_days():
        start = require_non_empty(request.args.get("start"), "start")
        # Open-ended ranges count up to today.
        end = request.args.get("end") or today_civil(tz=container.civil_tz)
        _check_span(start, end)
        policy = request.args.get("policy") or container.default_saturday_policy
        count = count_working_days(start, end, policy, tz=container.civil_tz)
        return jsonify({"success": True, "data": {"start": start, "end": end, "workingDays": count}}), 200
