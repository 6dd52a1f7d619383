from flask_jwt_extended import verify_jwt_in_request, get_jwt, get_jwt_identity


def current_actor():
    """Email (or identity) of the caller's JWT; None for anonymous requests."""
    verify_jwt_in_request(optional=True)
    identity = get_jwt_identity()
    if identity is None:
        return None
    return get_jwt().get("email") or str(identity)
