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

from smsru.domain.requests import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCallAuthStatusOptions,
    CheckCostOptions,
    CheckCostPerRecipient,
    CheckCostToMany,
    CheckStatus,
    JsonMode,
    RemoveCallback,
    RemoveStoplistEntry,
    SendOptions,
    SendSmsPerRecipient,
    SendSmsToMany,
    StartCallAuth,
)
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
from smsru.wire import form

PHONE_1 = RawPhoneNumber("+79251234567")
PHONE_2 = RawPhoneNumber("+74993221627")


class SendSmsFormTests(unittest.TestCase):
    def test_to_many(self) -> None:
        request = SendSmsToMany([PHONE_1, PHONE_2], MessageText("hello"))
        self.assertEqual(
            form.encode_send_sms_form(request),
            [
                ("json", "1"),
                ("to", "+79251234567,+74993221627"),
                ("msg", "hello"),
            ],
        )

    def test_to_many_without_json(self) -> None:
        request = SendSmsToMany(
            [PHONE_1, PHONE_2], MessageText("hello"), SendOptions(json=JsonMode.PLAIN)
        )
        self.assertEqual(
            form.encode_send_sms_form(request),
            [("to", "+79251234567,+74993221627"), ("msg", "hello")],
        )

    def test_per_recipient_ordered_by_phone(self) -> None:
        request = SendSmsPerRecipient(
            {PHONE_1: MessageText("hi 1"), PHONE_2: MessageText("hi 2")}
        )
        expected = [
            ("json", "1"),
            ("to[+74993221627]", "hi 2"),
            ("to[+79251234567]", "hi 1"),
        ]
        self.assertEqual(form.encode_send_sms_form(request), expected)
        # and again, to be sure it's stable
        self.assertEqual(form.encode_send_sms_form(request), expected)

    def test_all_options(self) -> None:
        options = SendOptions(
            sender=SenderId("MyShop"),
            ip=EndUserIp("192.0.2.1"),
            time=UnixTimestamp(1700000000),
            ttl=TtlMinutes(60),
            daytime=True,
            translit=True,
            test=True,
            partner_id=PartnerId("42"),
        )
        request = SendSmsToMany([PHONE_1], MessageText("hello"), options)
        self.assertEqual(
            form.encode_send_sms_form(request),
            [
                ("json", "1"),
                ("to", "+79251234567"),
                ("msg", "hello"),
                ("from", "MyShop"),
                ("ip", "192.0.2.1"),
                ("time", "1700000000"),
                ("ttl", "60"),
                ("daytime", "1"),
                ("translit", "1"),
                ("test", "1"),
                ("partner_id", "42"),
            ],
        )

    def test_false_flags_omitted(self) -> None:
        options = SendOptions(ttl=TtlMinutes(5), test=False, daytime=False)
        request = SendSmsToMany([PHONE_1], MessageText("hello"), options)
        names = [name for name, _ in form.encode_send_sms_form(request)]
        self.assertEqual(names, ["json", "to", "msg", "ttl"])

    def test_ipv6_sent_in_canonical_form(self) -> None:
        options = SendOptions(ip=EndUserIp("0:0:0:0:0:0:0:1"))
        request = SendSmsToMany([PHONE_1], MessageText("hello"), options)
        self.assertIn(("ip", "::1"), form.encode_send_sms_form(request))


class CheckCostFormTests(unittest.TestCase):
    def test_to_many_with_options(self) -> None:
        request = CheckCostToMany(
            [PHONE_1],
            MessageText("hello"),
            CheckCostOptions(sender=SenderId("MyShop"), translit=True),
        )
        self.assertEqual(
            form.encode_check_cost_form(request),
            [
                ("json", "1"),
                ("to", "+79251234567"),
                ("msg", "hello"),
                ("from", "MyShop"),
                ("translit", "1"),
            ],
        )

    def test_per_recipient(self) -> None:
        request = CheckCostPerRecipient(
            {PHONE_1: MessageText("a"), PHONE_2: MessageText("b")},
            CheckCostOptions(json=JsonMode.PLAIN),
        )
        self.assertEqual(
            form.encode_check_cost_form(request),
            [("to[+74993221627]", "b"), ("to[+79251234567]", "a")],
        )


class OtherFormTests(unittest.TestCase):
    def test_check_status(self) -> None:
        request = CheckStatus([SmsId("a-1"), SmsId("b-2")])
        self.assertEqual(
            form.encode_check_status_form(request),
            [("json", "1"), ("sms_id", "a-1,b-2")],
        )

    def test_call_auth(self) -> None:
        self.assertEqual(
            form.encode_start_call_auth_form(StartCallAuth(PHONE_1)),
            [("json", "1"), ("phone", "+79251234567")],
        )
        self.assertEqual(
            form.encode_check_call_auth_status_form(
                CheckCallAuthStatus(
                    CallCheckId("201737-542"),
                    CheckCallAuthStatusOptions(json=JsonMode.PLAIN),
                )
            ),
            [("check_id", "201737-542")],
        )

    def test_stoplist(self) -> None:
        self.assertEqual(
            form.encode_add_stoplist_form(
                AddStoplistEntry(RawPhoneNumber("79251234567"), StoplistText("fraud"))
            ),
            [
                ("json", "1"),
                ("stoplist_phone", "79251234567"),
                ("stoplist_text", "fraud"),
            ],
        )
        self.assertEqual(
            form.encode_remove_stoplist_form(
                RemoveStoplistEntry(RawPhoneNumber("79251234567"))
            ),
            [("json", "1"), ("stoplist_phone", "79251234567")],
        )

    def test_callback(self) -> None:
        url = CallbackUrl("https://example.com/cb")
        for request in (AddCallback(url), RemoveCallback(url)):
            self.assertEqual(
                form.encode_callback_form(request),
                [("json", "1"), ("url", "https://example.com/cb")],
            )

    def test_json_only(self) -> None:
        self.assertEqual(form.encode_json_only_form(), [("json", "1")])
