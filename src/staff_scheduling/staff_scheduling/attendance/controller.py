from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payloads import json_object, record_input, record_patch
from ..core.enums import RecordKind
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        panel = container.attendance_service.today_panel()
        return jsonify({"success": True, "staff": [p.to_dict() for p in panel]})

    @app.route("/api/attendance/<int:staff_id>/checkin", methods=["POST"], endpoint="attendance_checkin")
    def attendance_checkin(staff_id: int):
        record = container.attendance_service.check_in(staff_id)
        return jsonify({
            "success": True,
            "message": "Chấm công vào ca thành công!",
            "record_id": record.record_id,
            "status": record.status.value if record.status else None,
        }), 201

    @app.route("/api/attendance/<int:staff_id>/checkout", methods=["POST"], endpoint="attendance_checkout")
    def attendance_checkout(staff_id: int):
        record = container.attendance_service.check_out(staff_id)
        return jsonify({
            "success": True,
            "message": "Chấm công tan ca thành công!",
            "record_id": record.record_id,
            "check_out": record.end_time.strftime("%H:%M"),
        })

    @app.route("/api/attendance/records", methods=["POST"], endpoint="attendance_record_create")
    def attendance_record_create():
        data = json_object(request.get_json(silent=True))
        record = container.attendance_service.save_record(record_input(data, default_kind=RecordKind.ACTUAL))
        return jsonify({"success": True, "record_id": record.record_id}), 201

    @app.route("/api/attendance/records/<int:record_id>", methods=["PATCH"], endpoint="attendance_record_update")
    def attendance_record_update(record_id: int):
        data = json_object(request.get_json(silent=True))
        record = container.attendance_service.update_record(record_id, record_patch(data))
        return jsonify({"success": True, "record_id": record.record_id})

    @app.route("/api/attendance/records/<int:record_id>", methods=["DELETE"], endpoint="attendance_record_delete")
    def attendance_record_delete(record_id: int):
        container.attendance_service.delete_record(record_id)
        return jsonify({"success": True})
