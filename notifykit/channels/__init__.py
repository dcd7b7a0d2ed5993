"""Base types for notification channel mappers."""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from notifykit.errors import EncodingError


@dataclass
class ChannelPayload:
    """Represents the HTTP request payload for a notification channel."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string


def dump_model(model: BaseModel) -> dict[str, Any]:
    """Dump a wire model using its API field names, leaving out unset fields."""
    return model.model_dump(by_alias=True, exclude_none=True)


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return dump_model(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_json(data: Any) -> str:
    """
    Serialize a request body, raising EncodingError on failure.

    Pydantic models may appear anywhere inside ``data``.
    """
    try:
        return json.dumps(data, default=_default, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"failed to marshal payload: {e}") from e
