"""Pydantic integration: dates travel through JSON as ISO8601 strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic_core import core_schema

from plaindate.errors import InvalidDateStringError
from plaindate.model import Date

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


def encode(value: Date) -> str:
    return value.to_iso8601()


def decode(value: object) -> Date:
    """Decode a JSON string field into a :class:`Date`.

    Raises :class:`InvalidDateStringError` for strings that are not a calendar date, so
    pydantic reports ``Invalid date string`` instead of a generic type error.
    """

    if isinstance(value, Date):
        return value
    if not isinstance(value, str):
        raise ValueError("Expected a date string")
    parsed = Date.from_iso8601(value)
    if parsed is None:
        raise InvalidDateStringError(value)
    return parsed


class _IsoDateSchema:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,  # noqa: ANN401
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "date"}


IsoDate = Annotated[Date, _IsoDateSchema]


__all__ = ["IsoDate", "decode", "encode"]
