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

from io import StringIO
from unittest.mock import patch

from twisted.internet import defer
from twisted.trial import unittest

from smsru.cli import build_parser, main
from tests.utils import TEST_API_ID, make_client, ok_response


class CliTests(unittest.TestCase):
    def _call(self, argv, body):
        args = build_parser().parse_args(argv)
        call = args.build(args)
        client, transport = make_client(ok_response(body))
        response = self.successResultOf(defer.ensureDeferred(call(client)))
        return response, transport.requests[0]

    def test_send(self) -> None:
        _, (uri, fields) = self._call(
            [
                "send",
                "--to",
                "+79251234567,+74993221627",
                "--msg",
                "hello",
                "--from",
                "MyShop",
                "--ttl",
                "60",
                "--test",
            ],
            '{"status":"OK","status_code":100}',
        )
        self.assertEqual(uri, "https://sms.ru/sms/send")
        self.assertEqual(
            fields,
            [
                ("api_id", TEST_API_ID),
                ("json", "1"),
                ("to", "+79251234567,+74993221627"),
                ("msg", "hello"),
                ("from", "MyShop"),
                ("ttl", "60"),
                ("test", "1"),
            ],
        )

    def test_cost_per_recipient(self) -> None:
        _, (uri, fields) = self._call(
            [
                "cost",
                "--per-recipient",
                "+79251234567",
                "hi 1",
                "--per-recipient",
                "+74993221627",
                "hi 2",
            ],
            '{"status":"OK","status_code":100}',
        )
        self.assertEqual(uri, "https://sms.ru/sms/cost")
        self.assertEqual(
            fields[1:],
            [
                ("json", "1"),
                ("to[+74993221627]", "hi 2"),
                ("to[+79251234567]", "hi 1"),
            ],
        )

    def test_balance(self) -> None:
        response, (uri, _) = self._call(
            ["balance"], '{"status":"OK","status_code":100,"balance":"12.30"}'
        )
        self.assertEqual(uri, "https://sms.ru/my/balance")
        self.assertEqual(response.balance, "12.30")

    def test_stoplist_add(self) -> None:
        _, (uri, fields) = self._call(
            ["stoplist-add", "79251234567", "fraud"],
            '{"status":"OK","status_code":100}',
        )
        self.assertEqual(uri, "https://sms.ru/stoplist/add")
        self.assertIn(("stoplist_text", "fraud"), fields)

    def test_invalid_value_is_a_usage_error(self) -> None:
        with patch("sys.stderr", new_callable=StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(["send", "--to", "+79251234567", "--msg", "hi", "--ttl", "0"])
        self.assertEqual(cm.exception.code, 2)

    def test_send_needs_recipients(self) -> None:
        with patch("sys.stderr", new_callable=StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(["send", "--msg", "hi"])
        self.assertEqual(cm.exception.code, 2)
