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

"""Decoder for ``stoplist/get``."""

from typing import Any, Dict, Union

from smsru.domain.responses import StoplistResponse
from smsru.domain.values import RawPhoneNumber
from smsru.wire.envelope import (
    decode_envelope,
    embedded_value,
    optional_field,
    require_object,
)
from smsru.wire.scalar import decode_text, parse_json_object

_decode_stoplist_phone = embedded_value("stoplist_phone", RawPhoneNumber)


def _decode_stoplist(value: Any) -> Dict[RawPhoneNumber, str]:
    entries = {
        _decode_stoplist_phone(phone): decode_text(note)
        for phone, note in require_object(value, "stoplist").items()
    }
    return dict(sorted(entries.items()))


def decode_stoplist_response(body: Union[str, bytes]) -> StoplistResponse:
    """
    Decode the response to a ``stoplist/get`` request.

    The stoplist isn't tied to a request, so its keys are taken as they are
    rather than reconciled against request identifiers. Entries are ordered
    by phone number.
    """
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return StoplistResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        stoplist=optional_field(obj, "stoplist", _decode_stoplist) or {},
    )
