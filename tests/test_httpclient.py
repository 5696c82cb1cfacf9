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

from unittest.mock import Mock

from twisted.internet import defer
from twisted.test.proto_helpers import MemoryReactorClock
from twisted.trial import unittest

from smsru.http.httpclient import HttpResponse, TwistedFormTransport
from smsru.http.httpcommon import BodyExceededMaxSize
from tests.utils import FakeResponse


class TwistedFormTransportTests(unittest.TestCase):
    def setUp(self) -> None:
        self.reactor = MemoryReactorClock()
        self.transport = TwistedFormTransport(
            self.reactor, timeout=30, user_agent="smsru-tests", max_body_size=64
        )
        self.agent = Mock()
        self.transport.agent = self.agent

    def _post(self, fields):
        return defer.ensureDeferred(
            self.transport.post_form("https://sms.ru/sms/send", fields)
        )

    def test_posts_urlencoded_form(self) -> None:
        self.agent.request.return_value = defer.succeed(
            FakeResponse(code=200, body=b'{"status":"OK"}')
        )

        response = self.successResultOf(
            self._post([("api_id", "abc"), ("to[+79251234567]", "привет & bye")])
        )

        self.assertEqual(response, HttpResponse(code=200, body=b'{"status":"OK"}'))

        method, uri, headers = self.agent.request.call_args[0]
        self.assertEqual(method, b"POST")
        self.assertEqual(uri, b"https://sms.ru/sms/send")
        self.assertEqual(
            headers.getRawHeaders(b"Content-Type"),
            [b"application/x-www-form-urlencoded"],
        )
        self.assertEqual(headers.getRawHeaders(b"User-Agent"), [b"smsru-tests"])

        producer = self.agent.request.call_args[1]["bodyProducer"]
        self.assertEqual(
            producer._inputFile.getvalue(),
            b"api_id=abc&to%5B%2B79251234567%5D="
            b"%D0%BF%D1%80%D0%B8%D0%B2%D0%B5%D1%82+%26+bye",
        )

    def test_non_2xx_is_returned(self) -> None:
        self.agent.request.return_value = defer.succeed(
            FakeResponse(code=503, body=b"busy")
        )
        response = self.successResultOf(self._post([]))
        self.assertEqual(response.code, 503)
        self.assertEqual(response.body, b"busy")

    def test_body_too_large(self) -> None:
        self.agent.request.return_value = defer.succeed(
            FakeResponse(code=200, body=b"x" * 65)
        )
        self.failureResultOf(self._post([]), BodyExceededMaxSize)

    def test_declared_length_too_large(self) -> None:
        self.agent.request.return_value = defer.succeed(
            FakeResponse(code=200, body=b"", length=1024)
        )
        self.failureResultOf(self._post([]), BodyExceededMaxSize)

    def test_timeout(self) -> None:
        self.agent.request.return_value = defer.Deferred()

        d = self._post([])
        self.assertNoResult(d)

        self.reactor.advance(31)
        self.failureResultOf(d, defer.TimeoutError)
