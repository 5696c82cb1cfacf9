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

import enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

import attr

from smsru.domain.values import (
    CallbackUrl,
    CallCheckId,
    EndUserIp,
    MessageText,
    PartnerId,
    RawPhoneNumber,
    SenderId,
    SmsId,
    StoplistText,
    TtlMinutes,
    UnixTimestamp,
)
from smsru.errors import EmptyValueError, TooManyRecipientsError, TooManySmsIdsError

# Per-request limits documented by SMS.RU.
SEND_SMS_MAX_RECIPIENTS = 100
CHECK_COST_MAX_RECIPIENTS = 100
CHECK_STATUS_MAX_SMS_IDS = 100


class JsonMode(enum.Enum):
    """Response format requested from SMS.RU. Only JSON can be decoded."""

    JSON = "json"
    PLAIN = "plain"


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SendOptions:
    json: JsonMode = JsonMode.JSON
    sender: Optional[SenderId] = None
    ip: Optional[EndUserIp] = None
    time: Optional[UnixTimestamp] = None
    ttl: Optional[TtlMinutes] = None
    # Only deliver during the recipient's daytime.
    daytime: bool = False
    translit: bool = False
    # Validate the request without sending anything.
    test: bool = False
    partner_id: Optional[PartnerId] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCostOptions:
    json: JsonMode = JsonMode.JSON
    sender: Optional[SenderId] = None
    translit: bool = False


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StartCallAuthOptions:
    json: JsonMode = JsonMode.JSON


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCallAuthStatusOptions:
    json: JsonMode = JsonMode.JSON


def _recipient_count(max_count: int) -> Callable[[Any, Any, Any], None]:
    def _check(instance: Any, attribute: Any, value: Any) -> None:
        if not value:
            raise EmptyValueError(RawPhoneNumber.FIELD)
        if len(value) > max_count:
            raise TooManyRecipientsError(max_count, len(value))

    return _check


def _sorted_messages(
    messages: Mapping[RawPhoneNumber, MessageText]
) -> Dict[RawPhoneNumber, MessageText]:
    # Ordered by the canonical phone number so that encoding is deterministic.
    return dict(sorted(messages.items()))


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SendSmsToMany:
    """One message to many recipients."""

    recipients: Tuple[RawPhoneNumber, ...] = attr.ib(
        converter=tuple, validator=_recipient_count(SEND_SMS_MAX_RECIPIENTS)
    )
    msg: MessageText
    options: SendOptions = attr.ib(factory=SendOptions)

    def identifiers(self) -> Iterable[RawPhoneNumber]:
        return self.recipients


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SendSmsPerRecipient:
    """A different message for each recipient."""

    messages: Dict[RawPhoneNumber, MessageText] = attr.ib(
        converter=_sorted_messages,
        validator=_recipient_count(SEND_SMS_MAX_RECIPIENTS),
        hash=False,
    )
    options: SendOptions = attr.ib(factory=SendOptions)

    def identifiers(self) -> Iterable[RawPhoneNumber]:
        return self.messages.keys()


SendSms = Union[SendSmsToMany, SendSmsPerRecipient]


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCostToMany:
    recipients: Tuple[RawPhoneNumber, ...] = attr.ib(
        converter=tuple, validator=_recipient_count(CHECK_COST_MAX_RECIPIENTS)
    )
    msg: MessageText
    options: CheckCostOptions = attr.ib(factory=CheckCostOptions)

    def identifiers(self) -> Iterable[RawPhoneNumber]:
        return self.recipients


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCostPerRecipient:
    messages: Dict[RawPhoneNumber, MessageText] = attr.ib(
        converter=_sorted_messages,
        validator=_recipient_count(CHECK_COST_MAX_RECIPIENTS),
        hash=False,
    )
    options: CheckCostOptions = attr.ib(factory=CheckCostOptions)

    def identifiers(self) -> Iterable[RawPhoneNumber]:
        return self.messages.keys()


CheckCost = Union[CheckCostToMany, CheckCostPerRecipient]


def _sms_id_count(instance: Any, attribute: Any, value: Tuple[SmsId, ...]) -> None:
    if not value:
        raise EmptyValueError(SmsId.FIELD)
    if len(value) > CHECK_STATUS_MAX_SMS_IDS:
        raise TooManySmsIdsError(CHECK_STATUS_MAX_SMS_IDS, len(value))


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckStatus:
    """Delivery status query for up to 100 previously sent messages."""

    sms_ids: Tuple[SmsId, ...] = attr.ib(converter=tuple, validator=_sms_id_count)

    @classmethod
    def one(cls, sms_id: SmsId) -> "CheckStatus":
        return cls((sms_id,))

    def identifiers(self) -> Iterable[SmsId]:
        return self.sms_ids


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StartCallAuth:
    """Start a call authentication: the user proves ownership of ``phone`` by
    calling the number returned by SMS.RU.
    """

    phone: RawPhoneNumber
    options: StartCallAuthOptions = attr.ib(factory=StartCallAuthOptions)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCallAuthStatus:
    check_id: CallCheckId
    options: CheckCallAuthStatusOptions = attr.ib(factory=CheckCallAuthStatusOptions)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class AddStoplistEntry:
    phone: RawPhoneNumber
    text: StoplistText


@attr.s(frozen=True, slots=True, auto_attribs=True)
class RemoveStoplistEntry:
    phone: RawPhoneNumber


@attr.s(frozen=True, slots=True, auto_attribs=True)
class AddCallback:
    url: CallbackUrl


@attr.s(frozen=True, slots=True, auto_attribs=True)
class RemoveCallback:
    url: CallbackUrl
