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

"""Pieces shared by every response decoder: the ``status``/``status_code``/
``status_text`` envelope, optional fields and per-item maps.
"""

from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from smsru.domain.status import Status, StatusCode
from smsru.errors import ValidationError
from smsru.types import JsonDict
from smsru.wire.errors import (
    DuplicateResponseKeyError,
    InvalidEmbeddedValueError,
    MalformedPayloadError,
)
from smsru.wire.keys import KeyLookupTable
from smsru.wire.scalar import decode_code, decode_text

T = TypeVar("T")
K = TypeVar("K")

Envelope = Tuple[Status, StatusCode, Optional[str]]


def decode_status(value: Any) -> Status:
    if value == Status.OK.value:
        return Status.OK
    if value == Status.ERROR.value:
        return Status.ERROR
    raise MalformedPayloadError("unexpected status: %r" % (value,))


def require_object(value: Any, what: str) -> JsonDict:
    if not isinstance(value, dict):
        raise MalformedPayloadError("%s is not a JSON object: %r" % (what, value))
    return value


def decode_envelope(obj: JsonDict) -> Envelope:
    """
    Read the status triple every SMS.RU object carries.

    :param obj: The top-level response, or one per-item result.

    :return: The status, status code and (optional) status text.

    :raises MalformedPayloadError: if ``status`` or ``status_code`` is missing,
        or ``status`` is neither ``OK`` nor ``ERROR``.
    """
    if obj.get("status") is None:
        raise MalformedPayloadError("missing status")
    if obj.get("status_code") is None:
        raise MalformedPayloadError("missing status_code")

    status = decode_status(obj["status"])
    status_code = StatusCode(decode_code(obj["status_code"]))
    status_text = optional_field(obj, "status_text", decode_text)
    return status, status_code, status_text


def optional_field(
    obj: JsonDict, name: str, decoder: Callable[[Any], Optional[T]]
) -> Optional[T]:
    """Decode ``obj[name]``, treating an absent or ``null`` field as ``None``."""
    value = obj.get(name)
    if value is None:
        return None
    return decoder(value)


def embedded_value(field: str, factory: Callable[[str], T]) -> Callable[[Any], T]:
    """Build a decoder for a text field that holds a validated domain value.

    :param field: The field name, reported in errors.
    :param factory: The value type, e.g. :class:`smsru.domain.values.SmsId`.
    """

    def _decode(value: Any) -> T:
        text = decode_text(value)
        try:
            return factory(text)
        except ValidationError as e:
            raise InvalidEmbeddedValueError(field, text) from e

    return _decode


def decode_item_map(
    obj: JsonDict,
    name: str,
    table: KeyLookupTable[K],
    decode_item: Callable[[JsonDict], T],
) -> Dict[K, T]:
    """
    Decode a per-item map such as the ``sms`` object of ``sms/send``.

    :param obj: The top-level response.
    :param name: The name of the per-item field.
    :param table: Lookup table built from the request's identifiers.
    :param decode_item: Decoder for one item's object.

    :return: The decoded items, keyed by request identifier. Empty if the
        field is absent.

    :raises DuplicateResponseKeyError: if two keys resolve to the same
        identifier.
    """
    raw = obj.get(name)
    if raw is None:
        return {}

    items: Dict[K, T] = {}
    for key, value in require_object(raw, name).items():
        identifier = table.resolve(key)
        if identifier in items:
            raise DuplicateResponseKeyError(key)
        items[identifier] = decode_item(require_object(value, key))
    return items
