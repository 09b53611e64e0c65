from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_body
from ..common.validators import validate_feedback
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.feedback_service

    @app.route("/api/feedback", methods=["POST"], endpoint="submit_feedback")
    def submit_feedback():
        data = validate_feedback(json_body()).unwrap()
        feedback = service.submit(data)
        return jsonify(feedback.to_dict()), 201

    @app.route("/api/events/<event_id>/feedback", methods=["GET"], endpoint="event_feedback")
    def event_feedback(event_id: str):
        return jsonify([f.to_dict() for f in service.list_for_event(event_id)])
