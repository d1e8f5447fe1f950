"""Identifier codec for prompt and rule IDs.

IDs are unsigned 64-bit values. Their canonical text form is exactly 16
uppercase hex digits, zero-padded, no prefix:

    IDType(0x1234)  ->  "0000000000001234"

The text form is used everywhere an ID leaves Python: as a JSON field value
and as a JSON object key. Routing through text rather than numbers means a
consumer whose JSON numbers are doubles never loses precision, and keys stay
human-legible and lexically sortable.

IDType(0) is the "unset" ID, e.g. for a rule not bound to a session.
"""

from __future__ import annotations

__all__ = [
    "IDType",
    "decode",
    "encode",
]

import operator
import re
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from prompting.constants import ID_HEX_LENGTH, MAX_ID_VALUE
from prompting.exceptions import InvalidIDError

_HEX_ID = re.compile(rf"[0-9A-Fa-f]{{{ID_HEX_LENGTH}}}", re.ASCII)


class IDType(int):
    """Unsigned 64-bit prompt/rule identifier.

    Behaves as an int for comparison and hashing; str() gives the
    canonical hex form.

    Raises:
        InvalidIDError: If the value is outside [0, 2**64).
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> IDType:
        value = operator.index(value)
        if not 0 <= value <= MAX_ID_VALUE:
            raise InvalidIDError(value, "out of range for a 64-bit identifier")
        return super().__new__(cls, value)

    def __str__(self) -> str:
        return f"{int(self):0{ID_HEX_LENGTH}X}"

    def __repr__(self) -> str:
        return f"IDType(0x{self})"

    @property
    def is_unset(self) -> bool:
        """True for the zero ID."""
        return self == 0

    @classmethod
    def _validate_python(cls, value: Any) -> IDType:
        if isinstance(value, IDType):
            return value
        if isinstance(value, str):
            return decode(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise InvalidIDError(repr(value), "expected an int or hex string")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        """Validate from hex text (JSON) or int/text (Python); dump to hex text in JSON."""
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(decode, core_schema.str_schema()),
            python_schema=core_schema.no_info_plain_validator_function(cls._validate_python),
            serialization=core_schema.plain_serializer_function_ser_schema(encode, when_used="json"),
        )


def encode(id_: int) -> str:
    """Encode an ID as 16 uppercase hex digits.

    Args:
        id_: IDType or plain int in [0, 2**64).

    Returns:
        Canonical text form.

    Raises:
        InvalidIDError: If a plain int is out of range.
    """
    return str(IDType(id_))


def decode(text: str) -> IDType:
    """Decode the canonical text form of an ID.

    Input is case-insensitive; anything but exactly 16 hex digits is
    rejected, including whitespace, signs, "0x" prefixes and underscores.

    Args:
        text: Hex text to decode.

    Returns:
        Decoded IDType.

    Raises:
        InvalidIDError: If text is not exactly 16 hex digits.
    """
    if len(text) != ID_HEX_LENGTH:
        raise InvalidIDError(text, f"expected {ID_HEX_LENGTH} hex digits, got {len(text)} characters")
    if _HEX_ID.fullmatch(text) is None:
        raise InvalidIDError(text, "contains non-hexadecimal characters")
    return IDType(int(text, 16))
