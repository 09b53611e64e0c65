from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_body
from ..common.validators import validate_attendance_update, validate_registration
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.registration_service

    @app.route("/api/register", methods=["POST"], endpoint="register_student")
    def register_student():
        data = validate_registration(json_body()).unwrap()
        registration = service.register(data)
        return jsonify(registration.to_dict()), 201

    @app.route("/api/attendance", methods=["POST"], endpoint="update_attendance")
    def update_attendance():
        data = validate_attendance_update(json_body()).unwrap()
        registration = service.update_attendance(data)
        return jsonify(registration.to_dict())

    @app.route("/api/events/<event_id>/registrations", methods=["GET"], endpoint="event_registrations")
    def event_registrations(event_id: str):
        return jsonify([r.to_dict() for r in service.list_for_event(event_id)])
