from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from flask import jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..core.results import TransitionOutcome, TransitionResult


def to_json(entity: Any) -> Any:
    if entity is None:
        return None
    if hasattr(entity, "to_public_dict"):
        return entity.to_public_dict()
    if hasattr(entity, "to_dict"):
        return entity.to_dict()
    return entity


def list_response(items: Iterable[Any]):
    return jsonify([to_json(i) for i in items])


def entity_response(entity: Any, status: int = 200):
    return jsonify(to_json(entity)), status


def result_response(result: TransitionResult, *, created: bool = False):
    """Applied -> 200/201 with the entity; NOT_FOUND -> 404; any other no-op -> 409."""
    if result.applied:
        return jsonify({"outcome": result.outcome.value, "data": to_json(result.entity)}), 201 if created else 200

    status = 404 if result.outcome == TransitionOutcome.NOT_FOUND else 409
    return jsonify({"outcome": result.outcome.value, "data": to_json(result.entity)}), status


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_field(data: Dict[str, Any], name: str) -> Any:
    value = data.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{name} is required")
    return value


def optional_date(value: Optional[str]):
    return parse_iso_date(value) if value else None
