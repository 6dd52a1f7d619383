# recruitment/routes/dashboard_routes.py
from flask import Blueprint, request, jsonify

from recruitment.databases import candidate_to_dict
from recruitment.errors import LifecycleError, error_response
from recruitment.models import Status
from recruitment.services import aggregation, candidate_directory
from recruitment.services.insight_service import InsightService

dashboard_bp = Blueprint("dashboard_api", __name__, url_prefix="/api/dashboard")


@dashboard_bp.route("/board", methods=["GET"])
def board():
    """Candidates grouped by current status, one list per pipeline stage."""
    candidates = candidate_directory.list_candidates(request.args.get("search"))
    groups = aggregation.group_by_status(candidates)
    return jsonify({
        "data": {
            status.value: [candidate_to_dict(c, with_history=False) for c in groups.get(status, [])]
            for status in Status
        }
    }), 200


@dashboard_bp.route("/summary", methods=["GET"])
def summary():
    candidates = candidate_directory.list_candidates()
    counts = aggregation.status_counts(candidates)
    return jsonify({
        "data": {
            **aggregation.pipeline_summary(candidates),
            "by_status": {status.value: counts.get(status, 0) for status in Status},
        }
    }), 200


@dashboard_bp.route("/metrics", methods=["GET"])
def metrics():
    durations = aggregation.stage_durations(candidate_directory.list_candidates())
    return jsonify({"data": [{"stage": stage, "days": days} for stage, days in durations]}), 200


@dashboard_bp.route("/insights", methods=["POST"])
def insights():
    data = request.get_json(silent=True) or {}
    try:
        text = InsightService.from_app().analyze(candidate_directory.list_candidates(), data.get("job_profile"))
        return jsonify({"data": {"insights": text}}), 200
    except LifecycleError as e:
        return error_response(e)
