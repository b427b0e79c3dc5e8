from __future__ import annotations

from flask import Flask, jsonify, request, send_file, session
from werkzeug.utils import secure_filename

from ..common.validators import require_date
from ..core.exceptions import (
    DriverNotFound,
    ImportRejected,
    RecordNotFound,
    StorageFailure,
    ValidationError,
)
from ..container import Container

TRUTHY = {"1", "true", "yes", "on"}


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _actor_id():
        return session.get("user_id")

    def _bad_request(message: str):
        return jsonify({"error": message}), 400

    def _server_error():
        return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        try:
            date_s = request.args.get("date")
            work_date = require_date(date_s) if date_s else None
            rows = service.list_attendance(
                work_date=work_date,
                driver_id=request.args.get("driver_id") or None,
                include_all_drivers=(request.args.get("include_all_drivers", "").lower() in TRUTHY),
            )
        except ValidationError as e:
            return _bad_request(str(e))
        except StorageFailure:
            return _server_error()
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _bad_request("Invalid data format")
        try:
            record = service.mark(payload, actor_id=_actor_id())
        except ValidationError as e:
            return _bad_request(str(e))
        except DriverNotFound as e:
            return jsonify({"error": str(e)}), 404
        except StorageFailure:
            return _server_error()
        return jsonify(record.to_dict())

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    def attendance_bulk():
        payload = request.get_json(silent=True) or {}
        try:
            outcome = service.bulk_mark(payload.get("records") if isinstance(payload, dict) else None, actor_id=_actor_id())
        except ValidationError as e:
            return _bad_request(str(e))
        except StorageFailure:
            return _server_error()
        return jsonify(
            {
                "message": "Bulk attendance uploaded successfully",
                "count": outcome.count,
                "warnings": outcome.warnings,
            }
        )

    @app.route("/api/attendance/import", methods=["POST"], endpoint="attendance_import")
    def attendance_import():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return _bad_request("No file uploaded")

        filename = secure_filename(upload.filename)
        try:
            outcome = service.import_sheet(upload.read(), filename, actor_id=_actor_id())
        except ImportRejected as e:
            return (
                jsonify({"error": "Import failed", "errors": e.errors, "successCount": e.success_count}),
                400,
            )
        except ValidationError as e:
            return _bad_request(str(e))
        except StorageFailure:
            return _server_error()

        return jsonify(
            {
                "message": f"Imported {outcome.count} attendance records",
                "count": outcome.count,
                "format": outcome.sheet_format.value,
                "warnings": outcome.warnings,
            }
        )

    @app.route("/api/attendance/export", methods=["GET"], endpoint="attendance_export")
    def attendance_export():
        path = service.legacy_workbook_path()
        if path is None:
            return jsonify({"error": "Attendance workbook not found"}), 404
        return send_file(path, as_attachment=True, download_name=path.name)

    @app.route("/api/attendance/<attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(attendance_id):
        try:
            service.delete(attendance_id, actor_id=_actor_id())
        except ValidationError as e:
            return _bad_request(str(e))
        except RecordNotFound as e:
            return jsonify({"error": str(e)}), 404
        except StorageFailure:
            return _server_error()
        return jsonify({"message": "Attendance record deleted"})
