"""Turn multipart form bodies into entity payloads.

Form fields arrive as strings. List fields may be sent either as repeated
fields or as one JSON-encoded array. Only fields actually present in the
form end up in the payload, so a patch built from it knows which fields
were supplied.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from starlette.datastructures import FormData, UploadFile

from content_admin.core.exceptions import InvalidPayload

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode_json(key: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidPayload(
            f"Field '{key}' is not valid JSON",
            errors=[{"loc": [key], "msg": str(e)}],
        ) from e


def form_to_payload(
    form: FormData,
    list_fields: frozenset[str] = frozenset(),
    json_fields: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Collect the fields present in ``form`` into a plain dict.

    Args:
        form: Parsed multipart or urlencoded form
        list_fields: Keys whose values form a list of strings
        json_fields: Keys whose single value is a JSON document

    Raises:
        InvalidPayload: If a file is attached or a JSON field is malformed
    """
    payload: dict[str, Any] = {}

    for key in form.keys():
        values = form.getlist(key)
        if any(isinstance(v, UploadFile) for v in values):
            raise InvalidPayload(
                f"Field '{key}' must reference uploaded files by URL",
                errors=[{"loc": [key], "msg": "file attachments are not accepted"}],
            )

        if key in json_fields:
            payload[key] = _decode_json(key, values[-1]) if values[-1] else []
        elif key in list_fields:
            if len(values) == 1 and values[0].lstrip().startswith("["):
                payload[key] = _decode_json(key, values[0])
            else:
                payload[key] = [v for v in values if v]
        else:
            payload[key] = values[-1]

    return payload


def parse_payload(model: type[ModelT], payload: dict[str, Any]) -> ModelT:
    """Validate ``payload`` into ``model``, reporting failures as InvalidPayload."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise InvalidPayload(
            f"Invalid {model.__name__} payload",
            errors=[{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()],
        ) from e
