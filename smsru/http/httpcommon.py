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

from io import BytesIO
from typing import Optional, cast

from twisted.internet import defer, protocol
from twisted.internet.interfaces import ITCPTransport
from twisted.internet.protocol import connectionDone
from twisted.python.failure import Failure
from twisted.web.client import ResponseDone
from twisted.web.http import PotentialDataLoss
from twisted.web.iweb import UNKNOWN_LENGTH, IResponse

# SMS.RU answers are small; the biggest is a 100 recipient send or status.
DEFAULT_MAX_BODY_SIZE = 512 * 1024


class BodyExceededMaxSize(Exception):
    """The maximum allowed size of the HTTP body was exceeded."""

    def __init__(self, max_size: int) -> None:
        super().__init__("response body exceeded %d bytes" % (max_size,))
        self.max_size = max_size


class _ReadBodyWithMaxSizeProtocol(protocol.Protocol):
    """Collects a response body, erroring once it grows past ``max_size``.

    With ``discard`` set, the body is known to be too large already and the
    first event fails the read.
    """

    transport: ITCPTransport

    def __init__(
        self,
        deferred: "defer.Deferred[bytes]",
        max_size: Optional[int],
        discard: bool = False,
    ) -> None:
        self.stream = BytesIO()
        self.deferred = deferred
        self.length = 0
        self.max_size = max_size
        self.discard = discard

    def _fail(self) -> None:
        assert self.max_size is not None
        self.deferred.errback(BodyExceededMaxSize(self.max_size))
        # All the data gets discarded anyway.
        if self.transport is not None:
            self.transport.abortConnection()

    def dataReceived(self, data: bytes) -> None:
        if self.deferred.called:
            return

        if self.discard:
            self._fail()
            return

        self.stream.write(data)
        self.length += len(data)
        if self.max_size is not None and self.length > self.max_size:
            self._fail()

    def connectionLost(self, reason: Failure = connectionDone) -> None:
        if self.deferred.called:
            return

        if self.discard:
            self._fail()
        elif reason.check(ResponseDone, PotentialDataLoss):
            # PotentialDataLoss: the server didn't send a length and closed
            # the connection, which is how such bodies end.
            self.deferred.callback(self.stream.getvalue())
        else:
            self.deferred.errback(reason)


def read_body_with_max_size(
    response: IResponse, max_size: Optional[int]
) -> "defer.Deferred[bytes]":
    """
    Read a HTTP response body, optionally enforcing a maximum size.

    :param response: The HTTP response to read from.
    :param max_size: The maximum body size to allow, in bytes. ``None`` for no
        limit.

    :return: A Deferred which resolves to the body, or fails with
        :class:`BodyExceededMaxSize`.
    """
    d: "defer.Deferred[bytes]" = defer.Deferred()

    # Don't bother downloading a body Content-Length says is too large.
    discard = False
    if max_size is not None and response.length != UNKNOWN_LENGTH:
        discard = cast(int, response.length) > max_size

    response.deliverBody(_ReadBodyWithMaxSizeProtocol(d, max_size, discard))
    return d
