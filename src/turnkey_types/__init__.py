"""Turnkey Types - Pydantic DTOs mirroring the Turnkey public API schema."""

__version__ = "0.1.0"

# Base classes
from .base import (
    TurnkeyModel,
    Timestamp,
    PaginationOptions,
    QueryRequest,
    ActivityRequest,
    current_timestamp_ms,
    ActivityType,
)

from .activities import (
    Activity,
    ActivityResponse,
    ActivityStatus,
    Result,
)
from .errors import TurnkeyErrorResponse


def get_activity_request_models():
    """
    Map every versioned activity type string to its request envelope model.

    Returns:
        Dict of activity type string -> ActivityRequest subclass
    """
    import inspect
    import pkgutil
    import importlib

    import turnkey_types

    models = {}
    for module_info in pkgutil.iter_modules(turnkey_types.__path__, turnkey_types.__name__ + "."):
        module = importlib.import_module(module_info.name)
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, ActivityRequest) and obj is not ActivityRequest:
                default_type = obj.model_fields["type"].default
                if isinstance(default_type, str):
                    models[default_type] = obj
    return models


__all__ = [
    "TurnkeyModel",
    "Timestamp",
    "PaginationOptions",
    "QueryRequest",
    "ActivityRequest",
    "current_timestamp_ms",
    "Activity",
    "ActivityResponse",
    "ActivityStatus",
    "ActivityType",
    "Result",
    "TurnkeyErrorResponse",
    "get_activity_request_models",
]
