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

from smsru.util.stringutils import (
    is_valid_callback_url,
    is_valid_hostname,
    is_valid_ip_address,
    redact_form_fields,
)


class UtilTests(unittest.TestCase):
    """Tests string utility functions."""

    def test_is_valid_hostname(self):
        self.assertTrue(is_valid_hostname("example.com"))
        self.assertTrue(is_valid_hostname("EXAMPLE.COM"))
        self.assertTrue(is_valid_hostname("localhost"))
        self.assertTrue(is_valid_hostname("a.b.c.d"))

        self.assertFalse(is_valid_hostname("-example.com"))
        self.assertFalse(is_valid_hostname("example..com"))
        self.assertFalse(is_valid_hostname("example.com/path"))
        self.assertFalse(is_valid_hostname(""))

    def test_is_valid_ip_address(self):
        self.assertTrue(is_valid_ip_address("9.9.9.9"))
        self.assertTrue(is_valid_ip_address("::1"))
        self.assertTrue(is_valid_ip_address("a:b:c::"))

        self.assertFalse(is_valid_ip_address("9.9.9"))
        self.assertFalse(is_valid_ip_address("256.9.9.9"))
        self.assertFalse(is_valid_ip_address("[::1]"))
        self.assertFalse(is_valid_ip_address("example.com"))

    def test_is_valid_callback_url(self):
        self.assertTrue(is_valid_callback_url("https://example.com"))
        self.assertTrue(is_valid_callback_url("https://example.com:8443/sms?x=1"))
        self.assertTrue(is_valid_callback_url("http://[::1]:8080/cb"))

        self.assertFalse(is_valid_callback_url("mailto:a@example.com"))
        self.assertFalse(is_valid_callback_url("https://example.com:0x1/"))
        self.assertFalse(is_valid_callback_url("https://exa_mple.com/"))
        self.assertFalse(is_valid_callback_url("https://example.com/a b"))

    def test_redact_form_fields(self):
        self.assertEqual(
            redact_form_fields(
                [("api_id", "secret"), ("to", "+79251234567"), ("password", "pw")]
            ),
            "api_id=<redacted>&to=+79251234567&password=<redacted>",
        )
