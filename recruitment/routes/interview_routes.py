# recruitment/routes/interview_routes.py
import logging

from flask import Blueprint, current_app, jsonify

from recruitment.databases import calendar_event_to_dict, candidate_to_dict, interview_to_dict
from recruitment.errors import LifecycleError, error_response
from recruitment.services import aggregation, interview_registry
from recruitment.services.identity import current_actor
from recruitment.services.lifecycle import get_coordinator

logger = logging.getLogger(__name__)

interview_bp = Blueprint("interviews_api", __name__, url_prefix="/api/interviews")


@interview_bp.route("", methods=["GET"])
def list_interviews():
    interviews = interview_registry.list_ordered_by_date()
    return jsonify({"data": [interview_to_dict(i) for i in interviews]}), 200


@interview_bp.route("/calendar", methods=["GET"])
def calendar():
    events = aggregation.calendar_events(
        interview_registry.list_ordered_by_date(),
        duration_minutes=current_app.config.get("INTERVIEW_DURATION_MINUTES", 60),
    )
    return jsonify({"data": [calendar_event_to_dict(e) for e in events]}), 200


@interview_bp.route("/<interview_id>", methods=["DELETE"])
def cancel_interview(interview_id):
    try:
        candidate = get_coordinator().cancel_interview(interview_id, actor=current_actor())
        return jsonify({
            "message": "Interview cancelled and candidate history updated",
            "data": candidate_to_dict(candidate),
        }), 200
    except LifecycleError as e:
        logger.error(f"❌ Error cancelling interview {interview_id}: {e.message}")
        return error_response(e)
