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

import logging
import os
from typing import List, Optional, Tuple, Union

import attr
import twisted.logger
from twisted.python.failure import Failure
from twisted.web.client import ResponseDone
from twisted.web.iweb import UNKNOWN_LENGTH

from smsru.client import ApiIdAuth, SmsRuClient
from smsru.domain.values import ApiId
from smsru.endpoints import Endpoints
from smsru.http.httpclient import FormTransport, HttpResponse
from smsru.types import FormFields

TEST_API_ID = "test-api-id"


class ToTwistedHandler(logging.Handler):
    """logging handler which sends the logs to the twisted log"""

    tx_log = twisted.logger.Logger()

    def emit(self, record):
        log_entry = self.format(record)
        log_level = record.levelname.lower().replace("warning", "warn")
        self.tx_log.emit(
            twisted.logger.LogLevel.levelWithName(log_level), "{entry}", entry=log_entry
        )


def setup_logging():
    """Configure the python logging appropriately for the tests.

    (Logs will end up in _trial_temp.)
    """
    root_logger = logging.getLogger()

    log_format = "%(asctime)s - %(name)s - %(lineno)d - %(levelname)s" " - %(message)s"

    handler = ToTwistedHandler()
    formatter = logging.Formatter(log_format)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    log_level = os.environ.get("SMSRU_TEST_LOG_LEVEL", "ERROR")
    root_logger.setLevel(log_level)


setup_logging()


class FakeFormTransport(FormTransport):
    """A FormTransport that records submitted forms and plays back canned
    responses (or raises canned exceptions), in order.
    """

    def __init__(self, *responses: Union[HttpResponse, Exception]) -> None:
        self.responses = list(responses)
        self.requests: List[Tuple[str, FormFields]] = []

    async def post_form(self, uri: str, fields: FormFields) -> HttpResponse:
        self.requests.append((uri, list(fields)))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def ok_response(body: str) -> HttpResponse:
    return HttpResponse(code=200, body=body.encode("utf-8"))


def make_client(
    *responses: Union[HttpResponse, Exception],
    endpoints: Optional[Endpoints] = None,
) -> Tuple[SmsRuClient, FakeFormTransport]:
    """Create a client authenticated with TEST_API_ID, talking to a fake
    transport.
    """
    transport = FakeFormTransport(*responses)
    client = SmsRuClient(ApiIdAuth(ApiId(TEST_API_ID)), transport, endpoints)
    return client, transport


@attr.s(auto_attribs=True)
class FakeResponse:
    """A fake twisted.web.iweb.IResponse object, which delivers its body in a
    single chunk.
    """

    # HTTP response code
    code: int

    body: bytes = b""

    # Content-Length, if the server sent one.
    length: object = UNKNOWN_LENGTH

    def deliverBody(self, protocol):
        protocol.dataReceived(self.body)
        protocol.connectionLost(Failure(ResponseDone()))
