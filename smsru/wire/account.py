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

"""Decoders for the account methods: ``auth/check`` and ``my/*``. The
status-only decoder is also used by the stoplist and callback mutations.
"""

from typing import Any, List, Union

from smsru.domain.responses import (
    BalanceResponse,
    FreeUsageResponse,
    LimitUsageResponse,
    SendersResponse,
    StatusOnlyResponse,
)
from smsru.wire.envelope import decode_envelope, optional_field
from smsru.wire.errors import MalformedPayloadError
from smsru.wire.scalar import decode_count, decode_money, decode_text, parse_json_object


def decode_status_only_response(body: Union[str, bytes]) -> StatusOnlyResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return StatusOnlyResponse(
        status=status, status_code=status_code, status_text=status_text
    )


def decode_balance_response(body: Union[str, bytes]) -> BalanceResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return BalanceResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        balance=optional_field(obj, "balance", decode_money),
    )


def decode_free_usage_response(body: Union[str, bytes]) -> FreeUsageResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return FreeUsageResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        total_free=optional_field(obj, "total_free", decode_count),
        used_today=optional_field(obj, "used_today", decode_count),
    )


def decode_limit_usage_response(body: Union[str, bytes]) -> LimitUsageResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return LimitUsageResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        total_limit=optional_field(obj, "total_limit", decode_count),
        used_today=optional_field(obj, "used_today", decode_count),
    )


def _decode_text_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        raise MalformedPayloadError("expected a JSON array, got %r" % (value,))
    return [decode_text(v) for v in value]


def decode_senders_response(body: Union[str, bytes]) -> SendersResponse:
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    return SendersResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        senders=optional_field(obj, "senders", _decode_text_list) or [],
    )
