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

"""Decoders for ``callcheck/add`` and ``callcheck/status``."""

from typing import Optional, Union

from smsru.domain.responses import CheckCallAuthStatusResponse, StartCallAuthResponse
from smsru.domain.status import CallCheckStatusCode
from smsru.domain.values import CallCheckId, RawPhoneNumber
from smsru.wire.envelope import decode_envelope, embedded_value, optional_field
from smsru.wire.scalar import decode_count, decode_text, parse_json_object

_decode_check_id = embedded_value(CallCheckId.FIELD, CallCheckId)
_decode_call_phone = embedded_value("call_phone", RawPhoneNumber)


def decode_start_call_auth_response(body: Union[str, bytes]) -> StartCallAuthResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return StartCallAuthResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        check_id=optional_field(obj, "check_id", _decode_check_id),
        call_phone=optional_field(obj, "call_phone", _decode_call_phone),
        call_phone_pretty=optional_field(obj, "call_phone_pretty", decode_text),
        call_phone_html=optional_field(obj, "call_phone_html", decode_text),
    )


def _decode_check_status(value: object) -> Optional[CallCheckStatusCode]:
    code = decode_count(value)
    if code is None:
        return None
    return CallCheckStatusCode(code)


def decode_check_call_auth_status_response(
    body: Union[str, bytes]
) -> CheckCallAuthStatusResponse:
    """
    Decode the response to a ``callcheck/status`` request.

    ``check_status`` is read leniently: a value that isn't an integer is
    reported as ``None`` rather than failing the decode.
    """
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return CheckCallAuthStatusResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        check_status=optional_field(obj, "check_status", _decode_check_status),
        check_status_text=optional_field(obj, "check_status_text", decode_text),
    )
