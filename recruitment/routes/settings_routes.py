# recruitment/routes/settings_routes.py
from flask import Blueprint, request, jsonify

from recruitment.databases import reference_to_dict
from recruitment.errors import LifecycleError, error_response
from recruitment.services import reference_data
from recruitment.services.identity import current_actor

settings_bp = Blueprint("settings_api", __name__, url_prefix="/api/settings")


@settings_bp.route("/job-positions", methods=["GET"])
def list_job_positions():
    return jsonify({"data": [reference_to_dict(p) for p in reference_data.list_job_positions()]}), 200


@settings_bp.route("/job-positions", methods=["POST"])
def add_job_position():
    data = request.get_json(silent=True) or {}
    try:
        position = reference_data.add_job_position(data.get("name"), actor=current_actor())
        return jsonify({"data": reference_to_dict(position)}), 201
    except LifecycleError as e:
        return error_response(e)


@settings_bp.route("/interviewers", methods=["GET"])
def list_interviewers():
    return jsonify({"data": [reference_to_dict(i) for i in reference_data.list_interviewers()]}), 200


@settings_bp.route("/interviewers", methods=["POST"])
def add_interviewer():
    data = request.get_json(silent=True) or {}
    try:
        interviewer = reference_data.add_interviewer(data.get("name"), actor=current_actor())
        return jsonify({"data": reference_to_dict(interviewer)}), 201
    except LifecycleError as e:
        return error_response(e)
