# Copyright 2026 The smsru Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Decoding of JSON scalars that SMS.RU sends either as numbers or strings.

Bodies are parsed with a decoder that keeps every JSON number as the literal
token it was written as (see :class:`RawNumber`), so that an amount sent as
``10.00`` comes out as ``"10.00"`` rather than ``10.0``.
"""

import json
from typing import Any, NoReturn, Optional, Union

from smsru.types import JsonDict
from smsru.wire.errors import InvalidScalarError, MalformedPayloadError


class RawNumber(str):
    """A JSON number, kept as the exact token found in the body."""

    def is_integer(self) -> bool:
        return not any(c in self for c in ".eE")

    def __repr__(self) -> str:
        return "RawNumber(%s)" % (str.__repr__(self),)


def _reject_invalid_json(val: str) -> NoReturn:
    """Do not allow Infinity, -Infinity, or NaN values in JSON."""
    raise ValueError("Invalid JSON value: '%s'" % val)


# a JSON decoder that keeps numbers as their literal text and rejects Python
# extensions to JSON.
json_decoder = json.JSONDecoder(
    parse_float=RawNumber,
    parse_int=RawNumber,
    parse_constant=_reject_invalid_json,
)


def parse_json_object(body: Union[str, bytes]) -> JsonDict:
    """
    Parse a response body that must hold a single JSON object.

    :param body: The response body, as text or UTF-8 bytes.

    :return: The decoded object. Numbers in it are :class:`RawNumber`.

    :raises MalformedPayloadError: if the body isn't a JSON object.
    """
    try:
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        parsed = json_decoder.decode(body)
    except ValueError as e:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        raise MalformedPayloadError("invalid JSON response: %s" % (e,)) from e

    if not isinstance(parsed, dict):
        raise MalformedPayloadError(
            "expected a JSON object, got %s" % (type(parsed).__name__,)
        )
    return parsed


def decode_money(value: Any) -> str:
    """
    Read a money amount, keeping the server's formatting.

    :param value: A JSON value from :func:`parse_json_object`.

    :return: The amount as text, e.g. ``"10.00"``.
    """
    if isinstance(value, RawNumber):
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidScalarError("money amount", value)


def _integer_token(value: RawNumber, expected: str) -> int:
    if not value.is_integer():
        raise InvalidScalarError(expected, value)
    return int(value)


def decode_count(value: Any) -> Optional[int]:
    """
    Read a non-negative count.

    Strings that don't hold a non-negative integer are tolerated and read as
    ``None``.

    :param value: A JSON value from :func:`parse_json_object`.

    :return: The count, or ``None`` if a string value couldn't be read.

    :raises InvalidScalarError: if the value is a negative or fractional
        number, or not a string or number at all.
    """
    if isinstance(value, RawNumber):
        count = _integer_token(value, "count")
        if count < 0:
            raise InvalidScalarError("count", value)
        return count
    if isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError:
            return None
        return count if count >= 0 else None
    raise InvalidScalarError("count", value)


def decode_code(value: Any) -> int:
    """Read a status code, given as a number or an integer string."""
    if isinstance(value, RawNumber):
        return _integer_token(value, "status code")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidScalarError("status code", value)
    raise InvalidScalarError("status code", value)


def decode_text(value: Any) -> str:
    """Read a text field. Numbers are returned as their literal text."""
    if isinstance(value, str):
        return str(value)
    raise InvalidScalarError("text", value)
