from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.payloads import int_list, json_object, record_input, staff_ids, to_int, visible_dates
from ..core.enums import RecordKind
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules/templates", methods=["GET"], endpoint="schedule_templates")
    def schedule_templates():
        templates = container.schedule_service.templates()
        return jsonify({"success": True, "templates": [t.to_dict() for t in templates]})

    @app.route("/api/schedules", methods=["POST"], endpoint="schedule_save")
    def schedule_save():
        data = json_object(request.get_json(silent=True))
        records = container.schedule_service.save_schedule(
            record_input(data, default_kind=RecordKind.SCHEDULED),
            repeat_days=int_list(data, "repeat_days"),
            record_id=to_int(data["record_id"], "Bản ghi") if data.get("record_id") else None,
        )
        return jsonify({
            "success": True,
            "message": f"Đã lưu {len(records)} lịch",
            "created": len(records),
            "record_ids": [r.record_id for r in records],
        }), 201

    @app.route("/api/schedules/quick", methods=["POST"], endpoint="schedule_quick")
    def schedule_quick():
        data = json_object(request.get_json(silent=True))
        record = container.schedule_service.quick_create(
            to_int(data.get("staff_id"), "Nhân viên"),
            parse_iso_date(data.get("date") or ""),
            parse_hhmm(data.get("start") or ""),
            parse_hhmm(data.get("end") or ""),
        )
        return jsonify({"success": True, "record_id": record.record_id}), 201

    @app.route("/api/schedules/template", methods=["POST"], endpoint="schedule_apply_template")
    def schedule_apply_template():
        data = json_object(request.get_json(silent=True))
        result = container.schedule_service.apply_template(
            data.get("template") or "",
            staff_ids(data),
            visible_dates(data),
        )
        return jsonify({"success": True, **result.to_dict()})

    @app.route("/api/schedules/bulk", methods=["POST"], endpoint="schedule_apply_bulk")
    def schedule_apply_bulk():
        data = json_object(request.get_json(silent=True))
        result = container.schedule_service.apply_bulk(
            staff_ids(data),
            visible_dates(data),
            parse_hhmm(data.get("start") or ""),
            parse_hhmm(data.get("end") or ""),
        )
        return jsonify({"success": True, **result.to_dict()})

    @app.route("/api/schedules/<int:record_id>", methods=["DELETE"], endpoint="schedule_delete")
    def schedule_delete(record_id: int):
        container.schedule_service.delete_schedule(record_id)
        return jsonify({"success": True, "message": "Đã xóa lịch."})
