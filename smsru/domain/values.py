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

"""Validated value types used to build SMS.RU requests.

Every type validates itself on construction and raises a subclass of
:class:`smsru.errors.ValidationError` when the input is unusable. Each type
carries the name of the form field it is submitted as in ``FIELD``.
"""

from typing import Any, ClassVar, Optional, Tuple

import attr
import phonenumbers
from netaddr import AddrFormatError, IPAddress

from smsru.errors import (
    EmptyValueError,
    InvalidCallbackUrlError,
    InvalidIpAddressError,
    InvalidPhoneNumberError,
    InvalidTimestampError,
    TtlOutOfRangeError,
)
from smsru.util.stringutils import is_valid_callback_url, is_valid_ip_address


def _strip(value: str) -> str:
    return value.strip()


def _not_blank(instance: Any, attribute: "attr.Attribute[str]", value: str) -> None:
    if not value.strip():
        raise EmptyValueError(instance.FIELD)


def _not_empty(instance: Any, attribute: "attr.Attribute[str]", value: str) -> None:
    if value == "":
        raise EmptyValueError(instance.FIELD)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class ApiId:
    """SMS.RU ``api_id`` token, trimmed."""

    FIELD: ClassVar[str] = "api_id"

    value: str = attr.ib(converter=_strip, validator=_not_blank, repr=False)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True)
class Login:
    FIELD: ClassVar[str] = "login"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True)
class Password:
    """Account password. Whitespace is significant and kept as given."""

    FIELD: ClassVar[str] = "password"

    value: str = attr.ib(validator=_not_empty, repr=False)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True)
class PartnerId:
    FIELD: ClassVar[str] = "partner_id"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True)
class SenderId:
    """Sender name (``from``). It must be enabled on the SMS.RU account."""

    FIELD: ClassVar[str] = "from"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True)
class MessageText:
    """Message text. Must not be blank, but is submitted exactly as given."""

    FIELD: ClassVar[str] = "msg"

    value: str = attr.ib(validator=_not_blank)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True)
class StoplistText:
    """Note attached to a stoplist entry."""

    FIELD: ClassVar[str] = "stoplist_text"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True, order=True)
class SmsId:
    """Message id assigned by ``sms/send``."""

    FIELD: ClassVar[str] = "sms_id"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    def recognized_forms(self) -> Tuple[str, ...]:
        """The textual forms SMS.RU may echo this id back as."""
        return (self.value,)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True, order=True)
class CallCheckId:
    """Call authentication id assigned by ``callcheck/add``."""

    FIELD: ClassVar[str] = "check_id"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    def recognized_forms(self) -> Tuple[str, ...]:
        return (self.value,)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True, order=True)
class RawPhoneNumber:
    """A phone number exactly as it is sent to SMS.RU (only trimmed).

    No normalisation is applied. Use :meth:`from_phone_number` to submit the
    E.164 form of a parsed :class:`PhoneNumber` instead.
    """

    FIELD: ClassVar[str] = "to"

    value: str = attr.ib(converter=_strip, validator=_not_blank)

    @classmethod
    def from_phone_number(cls, number: "PhoneNumber") -> "RawPhoneNumber":
        return cls(number.e164)

    def recognized_forms(self) -> Tuple[str, ...]:
        """The textual forms SMS.RU may echo this number back as: the number as
        sent, and the same number with the leading ``+`` toggled.
        """
        if self.value.startswith("+"):
            return (self.value, self.value[1:])
        return (self.value, "+" + self.value)

    def __str__(self) -> str:
        return self.value


@attr.s(frozen=True, slots=True, auto_attribs=True, order=True)
class PhoneNumber:
    """A phone number parsed with ``phonenumbers``.

    Equality, ordering and hashing use the E.164 form only.
    """

    FIELD: ClassVar[str] = "to"

    e164: str
    raw: str = attr.ib(eq=False)
    parsed: phonenumbers.PhoneNumber = attr.ib(eq=False, repr=False)

    @classmethod
    def parse(cls, value: str, default_region: Optional[str] = None) -> "PhoneNumber":
        """
        Parse and normalise a phone number.

        :param value: The number as typed by a user.
        :param default_region: Two-letter region used when the number carries
            no explicit country prefix, e.g. ``"RU"``.

        :return: The parsed number.
        """
        raw = value.strip()
        if not raw:
            raise EmptyValueError(cls.FIELD)

        try:
            parsed = phonenumbers.parse(raw, default_region)
        except phonenumbers.NumberParseException:
            raise InvalidPhoneNumberError(raw)

        e164 = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
        return cls(e164=e164, raw=raw, parsed=parsed)

    def __str__(self) -> str:
        return self.e164


def _check_timestamp(instance: Any, attribute: "attr.Attribute[int]", value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidTimestampError(value)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class UnixTimestamp:
    """Scheduled send time, in seconds since the epoch."""

    FIELD: ClassVar[str] = "time"

    value: int = attr.ib(validator=_check_timestamp)

    def __str__(self) -> str:
        return str(self.value)


def _check_ttl(instance: Any, attribute: "attr.Attribute[int]", value: int) -> None:
    if not TtlMinutes.MIN <= value <= TtlMinutes.MAX:
        raise TtlOutOfRangeError(TtlMinutes.MIN, TtlMinutes.MAX, value)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class TtlMinutes:
    """How long SMS.RU keeps trying to deliver a message, in minutes."""

    FIELD: ClassVar[str] = "ttl"
    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 1440

    value: int = attr.ib(validator=_check_ttl)

    def __str__(self) -> str:
        return str(self.value)


def _canonical_ip(value: str) -> str:
    value = value.strip()
    if not is_valid_ip_address(value):
        return value
    try:
        return str(IPAddress(value))
    except AddrFormatError:
        # Scoped IPv6 addresses are sent as given.
        return value


def _check_ip(instance: Any, attribute: "attr.Attribute[str]", value: str) -> None:
    if not is_valid_ip_address(value):
        raise InvalidIpAddressError(value)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class EndUserIp:
    """IP address of the end user a message is sent on behalf of, kept in its
    canonical text form (``0:0:0:0:0:0:0:1`` becomes ``::1``).
    """

    FIELD: ClassVar[str] = "ip"

    value: str = attr.ib(converter=_canonical_ip, validator=_check_ip)

    def __str__(self) -> str:
        return self.value


def _check_callback_url(
    instance: Any, attribute: "attr.Attribute[str]", value: str
) -> None:
    if not value:
        raise EmptyValueError(instance.FIELD)
    if not is_valid_callback_url(value):
        raise InvalidCallbackUrlError(value)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class CallbackUrl:
    """An absolute http(s) URL SMS.RU posts delivery reports to."""

    FIELD: ClassVar[str] = "url"

    value: str = attr.ib(converter=_strip, validator=_check_callback_url)

    def __str__(self) -> str:
        return self.value
