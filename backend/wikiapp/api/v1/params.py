import re
from flask import request
from wikiapp.domain.exceptions import InvalidParam

INT_PATTERN = re.compile(r"^-?\d+\Z")


def request_data():
    """Form fields for multipart uploads, JSON body otherwise."""
    if request.form:
        return request.form
    return request.get_json(silent=True) or {}


def get_param(data, name, default=None):
    value = data.get(name, default)
    if value is not None and not isinstance(value, str):
        raise InvalidParam(name)
    return value


def get_required_param(data, name):
    value = get_param(data, name)
    if value is None or not value.strip():
        raise InvalidParam(name)
    return value


def get_int_param(data, name, *, required=True):
    value = data.get(name)
    if value is None or value == "":
        if required:
            raise InvalidParam(name)
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and INT_PATTERN.match(value):
        return int(value)
    raise InvalidParam(name)


def get_tags_param(data):
    """Form posts repeat the field, JSON sends a list or a string."""
    if hasattr(data, "getlist"):
        values = data.getlist("tags")
        if len(values) > 1:
            return values
    return data.get("tags")
