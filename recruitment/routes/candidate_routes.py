# recruitment/routes/candidate_routes.py
from datetime import datetime
import logging

from flask import Blueprint, request, jsonify, send_file

from recruitment.databases import candidate_to_dict, interview_to_dict
from recruitment.errors import LifecycleError, ValidationFailed, error_response
from recruitment.services import candidate_directory, interview_registry
from recruitment.services.documents import PendingDocument, parse_document_type
from recruitment.services.identity import current_actor
from recruitment.services.lifecycle import get_coordinator

logger = logging.getLogger(__name__)

candidate_bp = Blueprint("candidates_api", __name__, url_prefix="/api/candidates")


def _payload():
    """JSON body, or the form fields of a multipart request."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationFailed("The request body must be a JSON object")
    return data


def _pending_documents():
    files = request.files.getlist("documents")
    types = request.form.getlist("document_types")
    if len(types) != len(files):
        raise ValidationFailed("Every uploaded document needs a document type")

    documents = []
    for file, doc_type in zip(files, types):
        documents.append(PendingDocument(
            type=parse_document_type(doc_type),
            file_name=file.filename,
            raw_bytes=file.read(),
            content_type=file.mimetype,
        ))
    return documents


def _parse_datetime(value):
    if not value:
        raise ValidationFailed("Please provide the interview date and time")
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise ValidationFailed("Invalid date. Use ISO 8601, e.g. 2024-05-01T14:30")


@candidate_bp.route("", methods=["GET"])
def list_candidates():
    candidates = candidate_directory.list_candidates(request.args.get("search"))
    return jsonify({"data": [candidate_to_dict(c) for c in candidates]}), 200


@candidate_bp.route("", methods=["POST"])
def create_candidate():
    try:
        candidate = candidate_directory.create_candidate(_payload(), _pending_documents(), actor=current_actor())
        return jsonify({"data": candidate_to_dict(candidate)}), 201
    except LifecycleError as e:
        logger.warning(f"⚠️ Candidate not created: {e.message}")
        return error_response(e)


@candidate_bp.route("/<candidate_id>", methods=["GET"])
def get_candidate(candidate_id):
    try:
        candidate = candidate_directory.get_candidate(candidate_id)
        return jsonify({"data": candidate_to_dict(candidate)}), 200
    except LifecycleError as e:
        return error_response(e)


@candidate_bp.route("/<candidate_id>", methods=["PUT"])
def update_candidate(candidate_id):
    try:
        candidate = candidate_directory.update_candidate(
            candidate_id, _payload(), _pending_documents(), actor=current_actor()
        )
        return jsonify({"data": candidate_to_dict(candidate)}), 200
    except LifecycleError as e:
        logger.warning(f"⚠️ Candidate {candidate_id} not updated: {e.message}")
        return error_response(e)


@candidate_bp.route("/<candidate_id>", methods=["DELETE"])
def delete_candidate(candidate_id):
    try:
        get_coordinator().delete_candidate(candidate_id)
        return jsonify({"message": "Candidate deleted"}), 200
    except LifecycleError as e:
        logger.error(f"❌ Error deleting candidate {candidate_id}: {e.message}")
        return error_response(e)


@candidate_bp.route("/<candidate_id>/status", methods=["POST"])
def change_status(candidate_id):
    try:
        data = _payload()
        candidate = get_coordinator().change_status(
            candidate_id, data.get("status"), data.get("notes"), actor=current_actor()
        )
        return jsonify({"data": candidate_to_dict(candidate)}), 200
    except LifecycleError as e:
        logger.warning(f"⚠️ Status of {candidate_id} not changed: {e.message}")
        return error_response(e)


@candidate_bp.route("/<candidate_id>/interviews", methods=["GET"])
def list_candidate_interviews(candidate_id):
    interviews = interview_registry.list_for_candidate(candidate_id)
    return jsonify({"data": [interview_to_dict(i) for i in interviews]}), 200


@candidate_bp.route("/<candidate_id>/interviews", methods=["POST"])
def schedule_interview(candidate_id):
    try:
        data = _payload()
        candidate, interview = get_coordinator().schedule_interview(
            candidate_id,
            data.get("interviewer_id"),
            data.get("type"),
            _parse_datetime(data.get("date")),
            notes=data.get("notes"),
            actor=current_actor(),
        )
        return jsonify({
            "data": {
                "candidate": candidate_to_dict(candidate),
                "interview": interview_to_dict(interview),
            }
        }), 201
    except LifecycleError as e:
        logger.warning(f"⚠️ Interview for {candidate_id} not scheduled: {e.message}")
        return error_response(e)


@candidate_bp.route("/<candidate_id>/documents/<document_id>", methods=["GET"])
def download_document(candidate_id, document_id):
    try:
        document, stream = candidate_directory.open_document(candidate_id, document_id)
    except LifecycleError as e:
        return error_response(e)
    return send_file(stream, mimetype=document.content_type, download_name=document.file_name)
