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

"""Encoding of requests into ``application/x-www-form-urlencoded`` fields.

Encoders return an ordered list of ``(name, value)`` pairs. Output is
deterministic: the same request always encodes to the same fields in the same
order. Credentials are added by the client, never here.
"""

from typing import Union

from smsru.domain.requests import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckCostOptions,
    CheckCostPerRecipient,
    CheckStatus,
    JsonMode,
    RemoveCallback,
    RemoveStoplistEntry,
    SendOptions,
    SendSms,
    SendSmsPerRecipient,
    StartCallAuth,
)
from smsru.domain.values import CallbackUrl, MessageText, RawPhoneNumber, SmsId
from smsru.types import FormFields

JSON_FIELD = "json"
STOPLIST_PHONE_FIELD = "stoplist_phone"
CALL_AUTH_PHONE_FIELD = "phone"


def json_fields(mode: JsonMode) -> FormFields:
    """The ``json=1`` marker, if the response should be JSON."""
    if mode is JsonMode.JSON:
        return [(JSON_FIELD, "1")]
    return []


def _recipient_fields(
    request: Union[SendSms, CheckCost],
) -> FormFields:
    if isinstance(request, (SendSmsPerRecipient, CheckCostPerRecipient)):
        # messages is kept sorted by recipient
        return [
            ("%s[%s]" % (RawPhoneNumber.FIELD, phone.value), text.value)
            for phone, text in request.messages.items()
        ]

    return [
        (RawPhoneNumber.FIELD, ",".join(p.value for p in request.recipients)),
        (MessageText.FIELD, request.msg.value),
    ]


def _send_option_fields(options: SendOptions) -> FormFields:
    fields: FormFields = []
    for value in (options.sender, options.ip, options.time, options.ttl):
        if value is not None:
            fields.append((value.FIELD, str(value)))
    if options.daytime:
        fields.append(("daytime", "1"))
    if options.translit:
        fields.append(("translit", "1"))
    if options.test:
        fields.append(("test", "1"))
    if options.partner_id is not None:
        fields.append((options.partner_id.FIELD, options.partner_id.value))
    return fields


def _cost_option_fields(options: CheckCostOptions) -> FormFields:
    fields: FormFields = []
    if options.sender is not None:
        fields.append((options.sender.FIELD, options.sender.value))
    if options.translit:
        fields.append(("translit", "1"))
    return fields


def encode_send_sms_form(request: SendSms) -> FormFields:
    """
    Encode an ``sms/send`` request.

    :param request: The message(s) to send.

    :return: The form fields, e.g. ``json=1, to=+7925...,+7499..., msg=hello``.
    """
    return (
        json_fields(request.options.json)
        + _recipient_fields(request)
        + _send_option_fields(request.options)
    )


def encode_check_cost_form(request: CheckCost) -> FormFields:
    """Encode an ``sms/cost`` request."""
    return (
        json_fields(request.options.json)
        + _recipient_fields(request)
        + _cost_option_fields(request.options)
    )


def encode_check_status_form(request: CheckStatus) -> FormFields:
    return json_fields(JsonMode.JSON) + [
        (SmsId.FIELD, ",".join(i.value for i in request.sms_ids))
    ]


def encode_start_call_auth_form(request: StartCallAuth) -> FormFields:
    return json_fields(request.options.json) + [
        (CALL_AUTH_PHONE_FIELD, request.phone.value)
    ]


def encode_check_call_auth_status_form(request: CheckCallAuthStatus) -> FormFields:
    return json_fields(request.options.json) + [
        (request.check_id.FIELD, request.check_id.value)
    ]


def encode_add_stoplist_form(request: AddStoplistEntry) -> FormFields:
    return json_fields(JsonMode.JSON) + [
        (STOPLIST_PHONE_FIELD, request.phone.value),
        (request.text.FIELD, request.text.value),
    ]


def encode_remove_stoplist_form(request: RemoveStoplistEntry) -> FormFields:
    return json_fields(JsonMode.JSON) + [(STOPLIST_PHONE_FIELD, request.phone.value)]


def encode_callback_form(request: Union[AddCallback, RemoveCallback]) -> FormFields:
    """Encode a ``callback/add`` or ``callback/del`` request."""
    return json_fields(JsonMode.JSON) + [(CallbackUrl.FIELD, request.url.value)]


def encode_json_only_form() -> FormFields:
    """Fields for the methods that take no parameters besides credentials,
    such as ``my/balance`` or ``stoplist/get``.
    """
    return json_fields(JsonMode.JSON)
