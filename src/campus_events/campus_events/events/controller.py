from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_body
from ..common.validators import validate_new_event
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.event_service

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    def create_event():
        data = validate_new_event(json_body()).unwrap()
        event = service.create_event(data)
        return jsonify(event.to_dict()), 201

    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    def list_events():
        events = service.list_events(
            college_id=request.args.get("collegeId") or None,
            state=request.args.get("state") or None,
            event_type=request.args.get("type") or None,
        )
        return jsonify([e.to_dict() for e in events])

    @app.route("/api/events/<event_id>", methods=["GET"], endpoint="get_event")
    def get_event(event_id: str):
        return jsonify(service.get_event(event_id).to_dict())

    @app.route("/api/events/<event_id>/publish", methods=["POST"], endpoint="publish_event")
    def publish_event(event_id: str):
        event = service.publish_event(event_id)
        return jsonify({"success": True, "message": "Event published", "event": event.to_dict()})

    @app.route("/api/events/<event_id>/complete", methods=["POST"], endpoint="complete_event")
    def complete_event(event_id: str):
        event = service.complete_event(event_id)
        return jsonify({"success": True, "message": "Event completed", "event": event.to_dict()})

    @app.route("/api/events/<event_id>/cancel", methods=["POST"], endpoint="cancel_event")
    def cancel_event(event_id: str):
        event = service.cancel_event(event_id)
        return jsonify({"success": True, "message": "Event cancelled", "event": event.to_dict()})

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="delete_event")
    def delete_event(event_id: str):
        service.delete_event(event_id)
        return jsonify({"success": True, "message": "Event deleted successfully"})
