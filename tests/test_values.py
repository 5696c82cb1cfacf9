#  Copyright 2026 The smsru Authors
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from twisted.trial import unittest

from smsru.domain.values import (
    ApiId,
    CallbackUrl,
    EndUserIp,
    MessageText,
    Password,
    PhoneNumber,
    RawPhoneNumber,
    SenderId,
    SmsId,
    TtlMinutes,
    UnixTimestamp,
)
from smsru.errors import (
    EmptyValueError,
    InvalidCallbackUrlError,
    InvalidIpAddressError,
    InvalidPhoneNumberError,
    InvalidTimestampError,
    TtlOutOfRangeError,
    ValidationError,
)


class TextValueTests(unittest.TestCase):
    def test_trimmed(self) -> None:
        self.assertEqual(ApiId("  abc ").value, "abc")
        self.assertEqual(SenderId(" MyShop ").value, "MyShop")

    def test_blank_rejected_with_field_name(self) -> None:
        with self.assertRaises(EmptyValueError) as cm:
            SenderId("   ")
        self.assertEqual(cm.exception.field, "from")

    def test_password_keeps_whitespace(self) -> None:
        self.assertEqual(Password(" secret ").value, " secret ")
        self.assertRaises(EmptyValueError, Password, "")

    def test_message_text_kept_as_given(self) -> None:
        self.assertEqual(MessageText("  hello\n").value, "  hello\n")
        self.assertRaises(EmptyValueError, MessageText, " \n ")

    def test_secrets_not_in_repr(self) -> None:
        self.assertNotIn("abc", repr(ApiId("abc")))
        self.assertNotIn("hunter2", repr(Password("hunter2")))

    def test_validation_errors_are_value_errors(self) -> None:
        self.assertRaises(ValueError, SmsId, "")
        self.assertRaises(ValidationError, SmsId, "")


class RawPhoneNumberTests(unittest.TestCase):
    def test_recognized_forms_toggle_plus(self) -> None:
        self.assertEqual(
            RawPhoneNumber("+79251234567").recognized_forms(),
            ("+79251234567", "79251234567"),
        )
        self.assertEqual(
            RawPhoneNumber(" 79251234567 ").recognized_forms(),
            ("79251234567", "+79251234567"),
        )

    def test_ids_have_one_form(self) -> None:
        self.assertEqual(SmsId(" 000000-10000000 ").recognized_forms(), ("000000-10000000",))

    def test_ordering(self) -> None:
        numbers = [RawPhoneNumber("+79251234567"), RawPhoneNumber("+74993221627")]
        self.assertEqual(
            [n.value for n in sorted(numbers)], ["+74993221627", "+79251234567"]
        )

    def test_from_phone_number(self) -> None:
        number = PhoneNumber.parse("+7 (925) 123-45-67")
        self.assertEqual(RawPhoneNumber.from_phone_number(number).value, "+79251234567")


class PhoneNumberTests(unittest.TestCase):
    def test_parse_with_region(self) -> None:
        number = PhoneNumber.parse("8 925 123 45 67", "RU")
        self.assertEqual(number.e164, "+79251234567")
        self.assertEqual(number.raw, "8 925 123 45 67")

    def test_equal_by_e164(self) -> None:
        self.assertEqual(
            PhoneNumber.parse("+7 925 123-45-67"), PhoneNumber.parse("+79251234567")
        )

    def test_invalid(self) -> None:
        self.assertRaises(InvalidPhoneNumberError, PhoneNumber.parse, "not a number")
        self.assertRaises(EmptyValueError, PhoneNumber.parse, "  ")


class NumericValueTests(unittest.TestCase):
    def test_ttl_range(self) -> None:
        self.assertEqual(str(TtlMinutes(1)), "1")
        self.assertEqual(TtlMinutes(1440).value, 1440)
        with self.assertRaises(TtlOutOfRangeError) as cm:
            TtlMinutes(1441)
        self.assertEqual(cm.exception.actual, 1441)
        self.assertRaises(TtlOutOfRangeError, TtlMinutes, 0)

    def test_timestamp(self) -> None:
        self.assertEqual(str(UnixTimestamp(1700000000)), "1700000000")
        self.assertRaises(InvalidTimestampError, UnixTimestamp, -1)
        self.assertRaises(InvalidTimestampError, UnixTimestamp, True)


class EndUserIpTests(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(EndUserIp(" 192.0.2.1 ").value, "192.0.2.1")
        self.assertEqual(EndUserIp("2001:db8::1").value, "2001:db8::1")

    def test_canonical_form(self) -> None:
        self.assertEqual(EndUserIp("0:0:0:0:0:0:0:1").value, "::1")
        self.assertEqual(EndUserIp(" 2001:DB8:0:0::1 ").value, "2001:db8::1")

    def test_invalid(self) -> None:
        for value in ("1.2.3", "999.1.1.1", "example.com", ""):
            self.assertRaises(InvalidIpAddressError, EndUserIp, value)


class CallbackUrlTests(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(
            CallbackUrl(" https://example.com/sms/cb ").value,
            "https://example.com/sms/cb",
        )
        CallbackUrl("http://192.0.2.1:8080/cb")

    def test_invalid(self) -> None:
        for value in (
            "ftp://example.com/cb",
            "https:///cb",
            "example.com/cb",
            "https://exa mple.com/cb",
            "https://example.com:99999/cb",
        ):
            self.assertRaises(InvalidCallbackUrlError, CallbackUrl, value)

    def test_empty(self) -> None:
        self.assertRaises(EmptyValueError, CallbackUrl, "  ")
