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

import logging
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Optional
from urllib.parse import urlencode

import attr
from twisted.internet import defer
from twisted.internet.interfaces import IReactorTime
from twisted.web.client import Agent, FileBodyProducer
from twisted.web.http_headers import Headers
from twisted.web.iweb import IResponse

from smsru import __version__
from smsru.http.httpcommon import DEFAULT_MAX_BODY_SIZE, read_body_with_max_size
from smsru.types import FormFields

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "smsru/%s" % (__version__,)


@attr.s(frozen=True, slots=True, auto_attribs=True)
class HttpResponse:
    code: int
    body: bytes


class FormTransport(ABC):
    """Submits url-encoded forms over HTTP."""

    @abstractmethod
    async def post_form(self, uri: str, fields: FormFields) -> HttpResponse:
        """
        POST ``fields`` as an ``application/x-www-form-urlencoded`` body.

        :param uri: The URI to POST to.
        :param fields: The form fields, in submission order.

        :return: The HTTP status code and raw body of the response, whatever
            the status code.
        """
        pass


class TwistedFormTransport(FormTransport):
    """A :class:`FormTransport` built on a Twisted ``Agent``.

    The default endpoint factory uses the BrowserLikePolicyForHTTPS context
    factory, so certificates are validated like a browser would. Redirects
    aren't followed.
    """

    def __init__(
        self,
        reactor: IReactorTime,
        timeout: Optional[float] = 30,
        connect_timeout: Optional[float] = 15,
        user_agent: str = DEFAULT_USER_AGENT,
        max_body_size: Optional[int] = DEFAULT_MAX_BODY_SIZE,
    ) -> None:
        self.reactor = reactor
        self.timeout = timeout
        self.user_agent = user_agent
        self.max_body_size = max_body_size
        self.agent = Agent(reactor, connectTimeout=connect_timeout)

    async def post_form(self, uri: str, fields: FormFields) -> HttpResponse:
        d = defer.ensureDeferred(self._post_form(uri, fields))
        if self.timeout is not None:
            # Covers both waiting for the response and reading its body.
            d.addTimeout(self.timeout, self.reactor)
        return await d

    async def _post_form(self, uri: str, fields: FormFields) -> HttpResponse:
        body = urlencode(fields).encode("utf8")
        headers = Headers(
            {
                b"Content-Type": [b"application/x-www-form-urlencoded"],
                b"User-Agent": [self.user_agent.encode("utf8")],
            }
        )

        response: IResponse = await self.agent.request(
            b"POST",
            uri.encode("utf8"),
            headers,
            bodyProducer=FileBodyProducer(BytesIO(body)),
        )

        # Always read the body, otherwise we'll leak HTTP connections as per
        # https://twistedmatrix.com/documents/current/web/howto/client.html
        response_body = await read_body_with_max_size(response, self.max_body_size)
        logger.debug(
            "HTTP POST %s returned %d (%d bytes)", uri, response.code, len(response_body)
        )
        return HttpResponse(code=response.code, body=response_body)
