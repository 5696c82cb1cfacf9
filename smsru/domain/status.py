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

"""Status markers and status codes returned by SMS.RU.

Status codes are an open integer space. The raw integer is always kept in
:class:`StatusCode`; :class:`KnownStatusCode` only classifies the documented
subset, and returns nothing for codes it does not know about.
"""

import enum
from typing import FrozenSet, Optional

import attr


class Status(enum.Enum):
    OK = "OK"
    ERROR = "ERROR"


class KnownStatusCode(enum.Enum):
    # See https://sms.ru/api/status
    MESSAGE_NOT_FOUND = -1
    REQUEST_OK_OR_QUEUED = 100
    BEING_DELIVERED_TO_OPERATOR = 101
    SENT_IN_TRANSIT = 102
    DELIVERED = 103
    NOT_DELIVERED_TTL_EXPIRED = 104
    NOT_DELIVERED_DELETED_BY_OPERATOR = 105
    NOT_DELIVERED_PHONE_FAILURE = 106
    NOT_DELIVERED_UNKNOWN = 107
    NOT_DELIVERED_REJECTED = 108
    READ = 110
    NOT_DELIVERED_NO_ROUTE = 150
    INVALID_API_ID = 200
    INSUFFICIENT_FUNDS = 201
    INVALID_RECIPIENT_OR_NO_ROUTE = 202
    EMPTY_MESSAGE_TEXT = 203
    SENDER_NOT_ENABLED = 204
    MESSAGE_TOO_LONG = 205
    DAILY_LIMIT_EXCEEDED = 206
    NO_DELIVERY_ROUTE = 207
    INVALID_TIME = 208
    RECIPIENT_IN_STOP_LIST = 209
    USED_GET_INSTEAD_OF_POST = 210
    METHOD_NOT_FOUND = 211
    MESSAGE_NOT_UTF8 = 212
    TOO_MANY_NUMBERS = 213
    RECIPIENT_ABROAD_BLOCKED = 214
    RECIPIENT_IN_GLOBAL_STOP_LIST = 215
    FORBIDDEN_WORD_IN_TEXT = 216
    MISSING_DISCLAIMER_PHRASE = 217
    SERVICE_TEMPORARILY_UNAVAILABLE = 220
    SENDER_MUST_MATCH_BRAND = 221
    EXCEEDED_DAILY_LIMIT_TO_NUMBER = 230
    EXCEEDED_IDENTICAL_PER_MINUTE = 231
    EXCEEDED_IDENTICAL_PER_DAY = 232
    EXCEEDED_REPEAT_SEND_LIMIT = 233
    INVALID_TOKEN = 300
    INVALID_AUTH = 301
    ACCOUNT_NOT_CONFIRMED = 302
    CONFIRMATION_CODE_WRONG = 303
    TOO_MANY_CONFIRMATION_CODES = 304
    TOO_MANY_WRONG_ATTEMPTS = 305
    CALL_CHECK_NOT_CONFIRMED_YET = 400
    CALL_CHECK_CONFIRMED = 401
    CALL_CHECK_EXPIRED_OR_INVALID_CHECK_ID = 402
    SERVER_ERROR = 500
    LIMIT_IP_COUNTRY_MISMATCH_CATEGORY_1 = 501
    LIMIT_IP_COUNTRY_MISMATCH_CATEGORY_2 = 502
    LIMIT_TOO_MANY_TO_COUNTRY = 503
    LIMIT_TOO_MANY_FOREIGN_AUTH = 504
    LIMIT_TOO_MANY_FROM_IP = 505
    LIMIT_HOSTING_PROVIDER_IP = 506
    INVALID_END_USER_IP = 507
    LIMIT_TOO_MANY_CALLS = 508
    COUNTRY_BLOCKED = 550
    CALLBACK_URL_INVALID = 901
    CALLBACK_HANDLER_NOT_FOUND = 902

    @classmethod
    def from_code(cls, code: int) -> Optional["KnownStatusCode"]:
        try:
            return cls(code)
        except ValueError:
            return None

    def is_retryable(self) -> bool:
        """Whether this status is likely transient."""
        return self in _RETRYABLE

    def is_auth_error(self) -> bool:
        """Whether this status means the credentials are invalid or unusable."""
        return self in _AUTH_ERRORS


_RETRYABLE: FrozenSet[KnownStatusCode] = frozenset(
    (
        KnownStatusCode.SERVICE_TEMPORARILY_UNAVAILABLE,
        KnownStatusCode.TOO_MANY_CONFIRMATION_CODES,
        KnownStatusCode.TOO_MANY_WRONG_ATTEMPTS,
        KnownStatusCode.SERVER_ERROR,
    )
)

_AUTH_ERRORS: FrozenSet[KnownStatusCode] = frozenset(
    (
        KnownStatusCode.INVALID_API_ID,
        KnownStatusCode.INVALID_TOKEN,
        KnownStatusCode.INVALID_AUTH,
        KnownStatusCode.ACCOUNT_NOT_CONFIRMED,
    )
)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StatusCode:
    """A status code as sent by SMS.RU, known or not."""

    code: int

    def known_kind(self) -> Optional[KnownStatusCode]:
        return KnownStatusCode.from_code(self.code)

    def is_retryable(self) -> bool:
        kind = self.known_kind()
        return kind is not None and kind.is_retryable()

    def is_auth_error(self) -> bool:
        kind = self.known_kind()
        return kind is not None and kind.is_auth_error()

    def __int__(self) -> int:
        return self.code


class KnownCallCheckStatusCode(enum.Enum):
    NOT_CONFIRMED_YET = 400
    CONFIRMED = 401
    EXPIRED_OR_INVALID_CHECK_ID = 402

    @classmethod
    def from_code(cls, code: int) -> Optional["KnownCallCheckStatusCode"]:
        try:
            return cls(code)
        except ValueError:
            return None


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CallCheckStatusCode:
    """The ``check_status`` of a call authentication, known or not."""

    code: int

    def known_kind(self) -> Optional[KnownCallCheckStatusCode]:
        return KnownCallCheckStatusCode.from_code(self.code)

    def __int__(self) -> int:
        return self.code
