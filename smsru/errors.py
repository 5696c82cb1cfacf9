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

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from smsru.domain.status import StatusCode


class SmsRuError(Exception):
    """Base class for every error raised by the SMS.RU client."""


class ValidationError(SmsRuError, ValueError):
    """A domain value or request was rejected by its constructor."""


class EmptyValueError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__("%s must not be empty" % (field,))
        self.field = field


class TooManyRecipientsError(ValidationError):
    def __init__(self, max_count: int, actual: int) -> None:
        super().__init__("too many recipients: %d (max %d)" % (actual, max_count))
        self.max_count = max_count
        self.actual = actual


class TooManySmsIdsError(ValidationError):
    def __init__(self, max_count: int, actual: int) -> None:
        super().__init__("too many sms ids: %d (max %d)" % (actual, max_count))
        self.max_count = max_count
        self.actual = actual


class InvalidPhoneNumberError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__("invalid phone number: %s" % (value,))
        self.value = value


class TtlOutOfRangeError(ValidationError):
    def __init__(self, min_value: int, max_value: int, actual: int) -> None:
        super().__init__(
            "ttl minutes out of range: %d (expected %d..%d)"
            % (actual, min_value, max_value)
        )
        self.min_value = min_value
        self.max_value = max_value
        self.actual = actual


class InvalidTimestampError(ValidationError):
    def __init__(self, value: int) -> None:
        super().__init__("invalid unix timestamp: %r" % (value,))
        self.value = value


class InvalidCallbackUrlError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__("invalid callback url: %s" % (value,))
        self.value = value


class InvalidIpAddressError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__("invalid ip address: %s" % (value,))
        self.value = value


class TransportError(SmsRuError):
    """The HTTP request could not be completed (DNS, TLS, timeouts, ...).

    The underlying exception is available as ``__cause__``.
    """


class HttpStatusError(SmsRuError):
    """The server answered with a non-2xx HTTP status."""

    def __init__(self, status: int, body: Optional[str]) -> None:
        super().__init__("unexpected HTTP status: %d" % (status,))
        self.status = status
        self.body = body


class ApiError(SmsRuError):
    """SMS.RU decoded fine but reported a top-level ``ERROR`` status."""

    def __init__(self, status_code: "StatusCode", status_text: Optional[str]) -> None:
        super().__init__("API error: %d %s" % (status_code.code, status_text))
        self.status_code = status_code
        self.status_text = status_text


class ParseError(SmsRuError):
    """The response body could not be decoded.

    The :class:`smsru.wire.errors.DecodeError` is available as ``__cause__``.
    """


class UnsupportedResponseFormatError(SmsRuError):
    """The request asks for a response format the client cannot decode."""
