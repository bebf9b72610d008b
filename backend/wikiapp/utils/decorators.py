from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from wikiapp.domain.exceptions import PermissionDenied

def current_role():
    """Role level of the caller, or None for anonymous requests."""
    verify_jwt_in_request(optional=True)
    role = get_jwt().get("role")
    return role if isinstance(role, int) else None

def is_forbidden(required_role):
    role = current_role()
    return role is None or role > required_role

def roles_required(required_role):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if is_forbidden(required_role):
                raise PermissionDenied()

            return fn(*args, **kwargs)
        return wrapper
    return decorator
