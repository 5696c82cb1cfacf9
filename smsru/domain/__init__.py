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

from smsru.domain.requests import (
    CHECK_COST_MAX_RECIPIENTS,
    CHECK_STATUS_MAX_SMS_IDS,
    SEND_SMS_MAX_RECIPIENTS,
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCallAuthStatusOptions,
    CheckCost,
    CheckCostOptions,
    CheckCostPerRecipient,
    CheckCostToMany,
    CheckStatus,
    JsonMode,
    RemoveCallback,
    RemoveStoplistEntry,
    SendOptions,
    SendSms,
    SendSmsPerRecipient,
    SendSmsToMany,
    StartCallAuth,
    StartCallAuthOptions,
)
from smsru.domain.responses import (
    BalanceResponse,
    CallbacksResponse,
    CheckCallAuthStatusResponse,
    CheckCostResponse,
    CheckStatusResponse,
    FreeUsageResponse,
    LimitUsageResponse,
    SendersResponse,
    SendSmsResponse,
    SmsCostResult,
    SmsResult,
    SmsStatusResult,
    StartCallAuthResponse,
    StatusOnlyResponse,
    StoplistResponse,
)
from smsru.domain.status import (
    CallCheckStatusCode,
    KnownCallCheckStatusCode,
    KnownStatusCode,
    Status,
    StatusCode,
)
from smsru.domain.values import (
    ApiId,
    CallbackUrl,
    CallCheckId,
    EndUserIp,
    Login,
    MessageText,
    PartnerId,
    Password,
    PhoneNumber,
    RawPhoneNumber,
    SenderId,
    SmsId,
    StoplistText,
    TtlMinutes,
    UnixTimestamp,
)

__all__ = [
    "CHECK_COST_MAX_RECIPIENTS",
    "CHECK_STATUS_MAX_SMS_IDS",
    "SEND_SMS_MAX_RECIPIENTS",
    "AddCallback",
    "AddStoplistEntry",
    "ApiId",
    "BalanceResponse",
    "CallbackUrl",
    "CallbacksResponse",
    "CallCheckId",
    "CallCheckStatusCode",
    "CheckCallAuthStatus",
    "CheckCallAuthStatusOptions",
    "CheckCallAuthStatusResponse",
    "CheckCost",
    "CheckCostOptions",
    "CheckCostPerRecipient",
    "CheckCostResponse",
    "CheckCostToMany",
    "CheckStatus",
    "CheckStatusResponse",
    "EndUserIp",
    "FreeUsageResponse",
    "JsonMode",
    "KnownCallCheckStatusCode",
    "KnownStatusCode",
    "LimitUsageResponse",
    "Login",
    "MessageText",
    "PartnerId",
    "Password",
    "PhoneNumber",
    "RawPhoneNumber",
    "RemoveCallback",
    "RemoveStoplistEntry",
    "SenderId",
    "SendersResponse",
    "SendOptions",
    "SendSms",
    "SendSmsPerRecipient",
    "SendSmsResponse",
    "SendSmsToMany",
    "SmsCostResult",
    "SmsId",
    "SmsResult",
    "SmsStatusResult",
    "StartCallAuth",
    "StartCallAuthOptions",
    "StartCallAuthResponse",
    "Status",
    "StatusCode",
    "StatusOnlyResponse",
    "StoplistResponse",
    "StoplistText",
    "TtlMinutes",
    "UnixTimestamp",
]
