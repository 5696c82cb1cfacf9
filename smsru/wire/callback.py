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

"""Decoder for ``callback/add``, ``callback/del`` and ``callback/get``, which
all answer with the full list of registered callback URLs.
"""

from typing import Any, List, Union

from smsru.domain.responses import CallbacksResponse
from smsru.domain.values import CallbackUrl
from smsru.wire.envelope import decode_envelope, embedded_value, optional_field
from smsru.wire.errors import MalformedPayloadError
from smsru.wire.scalar import parse_json_object

_decode_callback_url = embedded_value(CallbackUrl.FIELD, CallbackUrl)


def _decode_callbacks(value: Any) -> List[CallbackUrl]:
    if not isinstance(value, list):
        raise MalformedPayloadError("expected a JSON array, got %r" % (value,))
    return [_decode_callback_url(v) for v in value]


def decode_callbacks_response(body: Union[str, bytes]) -> CallbacksResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return CallbacksResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        callback=optional_field(obj, "callback", _decode_callbacks) or [],
    )
