"""JSON encoding and decoding backed by msgspec."""

from typing import Any, Literal, Union, overload

import msgspec

from sqlbinding.exceptions import SerializationError

__all__ = ("decode_json", "encode_json")


def _fallback_to_string(value: Any) -> Any:
    # msgspec handles builtins, datetimes, Decimal, UUID and enums natively
    return str(value)


_encoder = msgspec.json.Encoder(enc_hook=_fallback_to_string)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode data to JSON.

    Args:
        data: Data to encode.
        as_bytes: Return ``bytes`` instead of ``str``.

    Raises:
        SerializationError: If msgspec cannot encode the value.

    Returns:
        JSON representation of ``data``.
    """
    try:
        encoded = _encoder.encode(data)
    except (msgspec.EncodeError, TypeError) as e:
        msg = f"Unable to encode value of type {type(data).__name__} to JSON"
        raise SerializationError(msg) from e
    return encoded if as_bytes else encoded.decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Any:
    """Decode a JSON document.

    Raises:
        SerializationError: If the payload is not valid JSON.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        msg = "Unable to decode JSON payload"
        raise SerializationError(msg) from e
