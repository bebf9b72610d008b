from flask import jsonify, current_app
from wikiapp.domain.exceptions import ApiError
from wikiapp.domain.invariants.exceptions import InvariantViolation

def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s: %s", type(error).__name__, error.message, exc_info=error)
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        current_app.logger.error("Invariant violation: %s", error)
        response = jsonify({
            "error": "InvariantViolation",
            "data": None,
            "message": str(error)
        })
        response.status_code = 409
        return response
