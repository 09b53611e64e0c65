from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_body
from ..common.validators import validate_new_college
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.college_service

    @app.route("/api/colleges", methods=["POST"], endpoint="create_college")
    def create_college():
        data = validate_new_college(json_body()).unwrap()
        return jsonify(service.create_college(data).to_dict()), 201

    @app.route("/api/colleges", methods=["GET"], endpoint="list_colleges")
    def list_colleges():
        return jsonify([c.to_dict() for c in service.list_colleges()])

    @app.route("/api/colleges/<college_id>", methods=["GET"], endpoint="get_college")
    def get_college(college_id: str):
        return jsonify(service.get_college(college_id).to_dict())

    @app.route("/api/colleges/<college_id>", methods=["DELETE"], endpoint="delete_college")
    def delete_college(college_id: str):
        service.delete_college(college_id)
        return jsonify({"success": True, "message": "College deleted successfully"})
