"""JSON serialization for token headers and claim sets."""

from collections.abc import Mapping
from typing import Any

import pydantic_core
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from simplejwt.core.errors import ParsingError


def _sort_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _sort_keys(value[k]) for k in sorted(value)}
    if isinstance(value, list | tuple):
        return [_sort_keys(v) for v in value]
    return value


class JSONCodec(BaseModel):
    """Immutable object <-> JSON text converter.

    Output is compact (no whitespace) and keeps mapping insertion order
    unless ``sort_keys`` is set. One instance can be shared by any number
    of builders and parsers.
    """

    model_config = ConfigDict(frozen=True)

    sort_keys: bool = False

    def encode(self, value: Any) -> str:
        """Serialize a JSON-compatible value to text."""
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json")
        if self.sort_keys:
            value = _sort_keys(value)
        try:
            return pydantic_core.to_json(value).decode("utf-8")
        except pydantic_core.PydanticSerializationError as exc:
            raise ParsingError(f"Value is not JSON serializable: {exc}") from exc

    def decode(self, text: str | bytes, shape: Any = dict) -> Any:
        """Parse JSON text and validate it against ``shape``.

        ``shape`` may be a pydantic model class or any type pydantic can
        build a TypeAdapter for.
        """
        try:
            raw = pydantic_core.from_json(text, allow_inf_nan=False)
        except ValueError as exc:
            raise ParsingError(f"Invalid JSON: {exc}") from exc
        try:
            return TypeAdapter(shape).validate_python(raw)
        except ValidationError as exc:
            raise ParsingError(f"JSON does not match {shape!r}") from exc


DEFAULT_CODEC = JSONCodec()
