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

"""Decoders for ``sms/send``, ``sms/cost`` and ``sms/status``."""

from typing import Any, Optional, Union

from smsru.domain.requests import CheckCost, CheckStatus, SendSms
from smsru.domain.responses import (
    CheckCostResponse,
    CheckStatusResponse,
    SendSmsResponse,
    SmsCostResult,
    SmsResult,
    SmsStatusResult,
)
from smsru.domain.values import SmsId
from smsru.types import JsonDict
from smsru.wire.envelope import (
    decode_envelope,
    decode_item_map,
    embedded_value,
    optional_field,
)
from smsru.wire.keys import KeyLookupTable
from smsru.wire.scalar import decode_count, decode_money, parse_json_object

_decode_sms_id_text = embedded_value(SmsId.FIELD, SmsId)


def _decode_sms_id(value: Any) -> Optional[SmsId]:
    # Blank ids read as absent.
    if isinstance(value, str) and not value.strip():
        return None
    return _decode_sms_id_text(value)


def _decode_sms_result(item: JsonDict) -> SmsResult:
    status, status_code, status_text = decode_envelope(item)
    return SmsResult(
        status=status,
        status_code=status_code,
        status_text=status_text,
        sms_id=optional_field(item, "sms_id", _decode_sms_id),
    )


def _decode_sms_cost_result(item: JsonDict) -> SmsCostResult:
    status, status_code, status_text = decode_envelope(item)
    return SmsCostResult(
        status=status,
        status_code=status_code,
        status_text=status_text,
        cost=optional_field(item, "cost", decode_money),
        sms=optional_field(item, "sms", decode_count),
    )


def _decode_sms_status_result(item: JsonDict) -> SmsStatusResult:
    status, status_code, status_text = decode_envelope(item)
    return SmsStatusResult(
        status=status,
        status_code=status_code,
        status_text=status_text,
        cost=optional_field(item, "cost", decode_money),
    )


def decode_send_sms_response(
    request: SendSms, body: Union[str, bytes]
) -> SendSmsResponse:
    """
    Decode the response to an ``sms/send`` request.

    :param request: The request the response answers. Its recipients are used
        to attribute per-recipient results.
    :param body: The response body.

    :return: The decoded response. Recipients SMS.RU refused are reported in
        ``sms`` with ``Status.ERROR``; they don't fail the decode.
    """
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    table = KeyLookupTable.from_identifiers(request.identifiers())
    return SendSmsResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        balance=optional_field(obj, "balance", decode_money),
        sms=decode_item_map(obj, "sms", table, _decode_sms_result),
    )


def decode_check_cost_response(
    request: CheckCost, body: Union[str, bytes]
) -> CheckCostResponse:
    """Decode the response to an ``sms/cost`` request."""
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    table = KeyLookupTable.from_identifiers(request.identifiers())
    return CheckCostResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        total_cost=optional_field(obj, "total_cost", decode_money),
        total_sms=optional_field(obj, "total_sms", decode_count),
        sms=decode_item_map(obj, "sms", table, _decode_sms_cost_result),
    )


def decode_check_status_response(
    request: CheckStatus, body: Union[str, bytes]
) -> CheckStatusResponse:
    """Decode the response to an ``sms/status`` request."""
    obj = parse_json_object(body)
    status, status_code, status_text = decode_envelope(obj)
    table = KeyLookupTable.from_identifiers(request.identifiers())
    return CheckStatusResponse(
        status=status,
        status_code=status_code,
        status_text=status_text,
        balance=optional_field(obj, "balance", decode_money),
        sms=decode_item_map(obj, "sms", table, _decode_sms_status_result),
    )
