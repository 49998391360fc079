"""JSON encoding and decoding for the accessibility contracts.

Keys are written in camelCase (``pageIndex``, ``boundingBox``), structure
types as their tag names, and node variants carry a ``kind`` discriminator so
whole trees decode back into the right classes.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from schemas.internal.checks import PDFUACheckResult
from schemas.internal.nodes import AnySemanticNode, SemanticNode

ModelT = TypeVar("ModelT", bound=BaseModel)
Payload = Union[str, bytes, bytearray, Mapping[str, Any]]

_NODE_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnySemanticNode)


def dump_payload(model: BaseModel) -> Dict[str, Any]:
    """Return a JSON-compatible dict using wire field names."""
    return model.model_dump(mode="json", by_alias=True)


def dump_json(model: BaseModel, *, indent: int | None = None) -> str:
    return model.model_dump_json(by_alias=True, indent=indent)


def _as_mapping(payload: Payload) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    try:
        decoded = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON payload: {exc.msg}") from exc
    if not isinstance(decoded, dict):
        raise ValueError("JSON payload must be an object")
    return decoded


def load_model(model_cls: Type[ModelT], payload: Payload) -> ModelT:
    """Decode a payload into ``model_cls``; malformed input raises ValueError."""
    data = _as_mapping(payload)
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise ValueError(
            f"Invalid {model_cls.__name__} payload: {exc.error_count()} error(s)\n{exc}"
        ) from exc


def load_node(payload: Payload) -> SemanticNode:
    """Decode any node variant, selected by its ``kind`` field."""
    data = _as_mapping(payload)
    try:
        return _NODE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ValueError(
            f"Invalid semantic node payload: {exc.error_count()} error(s)\n{exc}"
        ) from exc


def load_check_result(payload: Payload) -> PDFUACheckResult:
    return load_model(PDFUACheckResult, payload)


__all__ = [
    "Payload",
    "dump_json",
    "dump_payload",
    "load_check_result",
    "load_model",
    "load_node",
]
