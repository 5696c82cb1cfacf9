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

"""Typed SMS.RU responses.

Every response carries the top-level ``status``, ``status_code`` and
``status_text`` triple. Money amounts are kept as the exact text SMS.RU sent
(``"10.00"`` stays ``"10.00"``). Per-item results are keyed by the identifier
the caller put in the request, and may report ``Status.ERROR`` while the
envelope itself is ``Status.OK``.
"""

from typing import Dict, List, Optional

import attr

from smsru.domain.status import CallCheckStatusCode, Status, StatusCode
from smsru.domain.values import CallbackUrl, CallCheckId, RawPhoneNumber, SmsId


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SmsResult:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    sms_id: Optional[SmsId] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SendSmsResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    balance: Optional[str] = None
    sms: Dict[RawPhoneNumber, SmsResult] = attr.ib(factory=dict, hash=False)

    def failed(self) -> Dict[RawPhoneNumber, SmsResult]:
        """The recipients SMS.RU refused, even though the request succeeded."""
        return {k: v for k, v in self.sms.items() if v.status is Status.ERROR}


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SmsCostResult:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    cost: Optional[str] = None
    # Number of SMS segments the message is split into.
    sms: Optional[int] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCostResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    total_cost: Optional[str] = None
    total_sms: Optional[int] = None
    sms: Dict[RawPhoneNumber, SmsCostResult] = attr.ib(factory=dict, hash=False)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SmsStatusResult:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    cost: Optional[str] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckStatusResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    balance: Optional[str] = None
    sms: Dict[SmsId, SmsStatusResult] = attr.ib(factory=dict, hash=False)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StartCallAuthResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    check_id: Optional[CallCheckId] = None
    # The number the user has to call.
    call_phone: Optional[RawPhoneNumber] = None
    call_phone_pretty: Optional[str] = None
    call_phone_html: Optional[str] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CheckCallAuthStatusResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    check_status: Optional[CallCheckStatusCode] = None
    check_status_text: Optional[str] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StatusOnlyResponse:
    """Returned by methods that only report the status triple, such as
    ``auth/check`` and the stoplist mutations.
    """

    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class BalanceResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    balance: Optional[str] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class FreeUsageResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    # Free messages to the account owner's own number.
    total_free: Optional[int] = None
    used_today: Optional[int] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class LimitUsageResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    total_limit: Optional[int] = None
    used_today: Optional[int] = None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SendersResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    senders: List[str] = attr.ib(factory=list, hash=False)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StoplistResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    stoplist: Dict[RawPhoneNumber, str] = attr.ib(factory=dict, hash=False)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CallbacksResponse:
    status: Status
    status_code: StatusCode
    status_text: Optional[str] = None
    callback: List[CallbackUrl] = attr.ib(factory=list, hash=False)
