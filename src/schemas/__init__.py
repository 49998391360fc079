"""Schema package for the semantic tree and check-result contracts."""

from .codec import dump_json, dump_payload, load_check_result, load_model, load_node

__all__ = [
    "dump_json",
    "dump_payload",
    "load_check_result",
    "load_model",
    "load_node",
]
