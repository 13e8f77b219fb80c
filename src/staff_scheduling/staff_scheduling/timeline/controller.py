from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timeline", methods=["GET"], endpoint="timeline")
    def timeline():
        view = request.args.get("view") or "today"
        day_s = request.args.get("date")
        today = parse_iso_date(day_s) if day_s else None

        groups = container.timeline_service.timeline(view, today=today)
        return jsonify({"success": True, "view": view, "groups": [g.to_dict() for g in groups]})
