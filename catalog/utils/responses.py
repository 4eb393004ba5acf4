from flask import jsonify


def success_response(data, status_code=200, message=None, pagination=None):
    """Build the ``{success: true, data, message?, pagination?}`` envelope"""
    body = {"success": True, "data": data}
    if message is not None:
        body["message"] = message
    if pagination is not None:
        body["pagination"] = pagination
    return jsonify(body), status_code


def error_response(error, status_code, details=None, message=None):
    """Build the ``{success: false, error, details?, message?}`` envelope"""
    body = {"success": False, "error": error}
    if details:
        body["details"] = details
    if message is not None:
        body["message"] = message
    return jsonify(body), status_code
