"""Tests for the identifier codec."""

import json

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from prompting.exceptions import InvalidIDError
from prompting.ids import IDType, decode, encode

CANONICAL_CASES = [
    (0, "0000000000000000"),
    (1, "0000000000000001"),
    (0x1000000000000000, "1000000000000000"),
    (0xDEADBEEFDEADBEEF, "DEADBEEFDEADBEEF"),
    (0xFFFFFFFFFFFFFFFF, "FFFFFFFFFFFFFFFF"),
]


class _Record(BaseModel):
    id: IDType


class TestEncodeDecode:
    """Tests for encode/decode and the IDType text form."""

    @pytest.mark.parametrize(("value", "text"), CANONICAL_CASES)
    def test_encode_is_fixed_width_uppercase(self, value: int, text: str):
        """Every ID encodes to its 16-digit uppercase form."""
        assert encode(value) == text
        assert str(IDType(value)) == text

    @pytest.mark.parametrize(("value", "text"), CANONICAL_CASES)
    def test_decode_reverses_encode(self, value: int, text: str):
        """Decoding the canonical text gives back the same ID."""
        decoded = decode(text)
        assert isinstance(decoded, IDType)
        assert decoded == value
        assert encode(decoded) == text

    def test_decode_accepts_lowercase_and_normalizes(self):
        """Lowercase input decodes; output is uppercase."""
        decoded = decode("deadbeefdeadbeef")
        assert decoded == 0xDEADBEEFDEADBEEF
        assert str(decoded) == "DEADBEEFDEADBEEF"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "1234",
            "000000000000001",
            "00000000000000001",
            "0x00000000000001",
            "000000000000000G",
            " 000000000000001",
            "+000000000000001",
            "0000_00000000001",
            "０" * 16,  # fullwidth digit zero
        ],
    )
    def test_decode_rejects_malformed_text(self, text: str):
        """Anything but exactly 16 ASCII hex digits is a format error."""
        with pytest.raises(InvalidIDError) as exc_info:
            decode(text)
        assert exc_info.value.value == text
        assert str(exc_info.value).startswith("invalid ID: ")

    @pytest.mark.parametrize("value", [-1, 1 << 64])
    def test_out_of_range_integers_rejected(self, value: int):
        """IDs are unsigned 64-bit."""
        with pytest.raises(InvalidIDError):
            IDType(value)

    def test_invalid_id_error_is_value_error(self):
        """Format errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            decode("nope")

    def test_repr_shows_hex(self):
        """repr is readable in debugging output."""
        assert repr(IDType(0x1234)) == "IDType(0x0000000000001234)"

    def test_format_uses_text_form(self):
        """f-strings render the canonical text form."""
        assert f"{IDType(0x1234)}" == "0000000000001234"

    def test_zero_is_unset(self):
        """Only the zero ID is unset."""
        assert IDType().is_unset
        assert IDType(0).is_unset
        assert not IDType(1).is_unset

    def test_behaves_as_int(self):
        """IDs compare and hash as their integer values."""
        assert IDType(5) == 5
        assert hash(IDType(5)) == hash(5)
        assert {IDType(5): "a"}[5] == "a"


class TestJsonSerialization:
    """Tests for IDs inside pydantic models and JSON."""

    @pytest.mark.parametrize(("value", "text"), CANONICAL_CASES)
    def test_field_value_round_trip(self, value: int, text: str):
        """IDs serialize as quoted hex strings, never as numbers."""
        record = _Record(id=IDType(value))
        marshalled = record.model_dump_json()
        assert marshalled == f'{{"id":"{text}"}}'

        restored = _Record.model_validate_json(marshalled)
        assert restored.id == value
        assert isinstance(restored.id, IDType)

    def test_python_dump_keeps_id_type(self):
        """Python-mode dumps keep IDType; JSON-mode dumps give text."""
        record = _Record(id=IDType(0xFF))
        assert isinstance(record.model_dump()["id"], IDType)
        assert record.model_dump(mode="json") == {"id": "00000000000000FF"}

    def test_map_key_round_trip(self):
        """IDs used as mapping keys serialize as hex text keys."""
        adapter = TypeAdapter(dict[IDType, str])
        as_key = {IDType(0x1234): "foo"}

        marshalled = adapter.dump_json(as_key)
        assert marshalled == b'{"0000000000001234":"foo"}'

        restored = adapter.validate_json(marshalled)
        assert restored == as_key
        assert all(isinstance(key, IDType) for key in restored)

    def test_map_value_round_trip(self):
        """IDs used as mapping values serialize as hex text values."""
        adapter = TypeAdapter(dict[str, IDType])
        as_value = {"foo": IDType(0x5678)}

        marshalled = adapter.dump_json(as_value)
        assert marshalled == b'{"foo":"0000000000005678"}'
        assert adapter.validate_json(marshalled) == as_value

    def test_map_keys_sort_lexically_by_value(self):
        """Fixed-width keys sort the same as the numeric IDs."""
        adapter = TypeAdapter(dict[IDType, int])
        ids = [IDType(0x10), IDType(0x2), IDType(0xFFFF), IDType(0x1)]
        dumped = json.loads(adapter.dump_json({i: int(i) for i in ids}))
        assert sorted(dumped) == [encode(i) for i in sorted(ids)]

    def test_json_number_rejected(self):
        """JSON numbers are not accepted for IDs."""
        with pytest.raises(ValidationError):
            _Record.model_validate_json('{"id": 4660}')

    def test_malformed_json_text_rejected(self):
        """Malformed hex text is a validation error carrying the format error."""
        with pytest.raises(ValidationError) as exc_info:
            _Record.model_validate_json('{"id": "1234"}')
        error = exc_info.value.errors()[0]["ctx"]["error"]
        assert isinstance(error, InvalidIDError)

    def test_python_input_accepts_int_and_text(self):
        """From Python, ints and hex text both validate."""
        assert _Record(id=0x1234).id == 0x1234
        assert _Record.model_validate({"id": "0000000000001234"}).id == 0x1234

    def test_python_input_rejects_bool(self):
        """Booleans are not IDs."""
        with pytest.raises(ValidationError):
            _Record.model_validate({"id": True})
