from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        students = service.list_students(college_id=request.args.get("collegeId") or None)
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        return jsonify(service.get_student(student_id).to_dict())
