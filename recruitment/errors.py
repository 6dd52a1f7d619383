"""Error kinds raised by the recruitment services.

Services raise these; routes turn them into a single JSON failure response.
"""
from flask import jsonify


class LifecycleError(Exception):
    kind = "OperationFailed"
    http_status = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message, "kind": self.kind}


class ValidationFailed(LifecycleError):
    kind = "ValidationFailed"
    http_status = 400


class NotFound(LifecycleError):
    kind = "NotFound"
    http_status = 404


class PersistenceFailed(LifecycleError):
    kind = "PersistenceFailed"
    http_status = 500


class ObjectStoreFailed(LifecycleError):
    kind = "ObjectStoreFailed"
    http_status = 502


class OperationAborted(LifecycleError):
    kind = "OperationAborted"
    http_status = 502


def error_response(exc):
    return jsonify(exc.to_dict()), exc.http_status
