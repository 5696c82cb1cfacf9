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
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, Union

import attr
from prometheus_client import Counter

from smsru.domain.requests import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckStatus,
    JsonMode,
    RemoveCallback,
    RemoveStoplistEntry,
    SendSms,
    StartCallAuth,
)
from smsru.domain.responses import (
    BalanceResponse,
    CallbacksResponse,
    CheckCallAuthStatusResponse,
    CheckCostResponse,
    CheckStatusResponse,
    FreeUsageResponse,
    LimitUsageResponse,
    SendersResponse,
    SendSmsResponse,
    StartCallAuthResponse,
    StatusOnlyResponse,
    StoplistResponse,
)
from smsru.domain.status import Status
from smsru.domain.values import ApiId, Login, Password
from smsru.endpoints import Endpoints
from smsru.errors import (
    ApiError,
    HttpStatusError,
    ParseError,
    TransportError,
    UnsupportedResponseFormatError,
)
from smsru.http.httpclient import FormTransport, TwistedFormTransport
from smsru.types import FormFields
from smsru.util.stringutils import redact_form_fields
from smsru.wire import account, callback, callcheck, form, sms, stoplist
from smsru.wire.errors import DecodeError

if TYPE_CHECKING:
    from twisted.internet.interfaces import IReactorTime

    from smsru.config import SmsRuConfig

logger = logging.getLogger(__name__)

requests_counter = Counter(
    "smsru_api_requests",
    "Number of SMS.RU API calls, by method and outcome",
    ["method", "outcome"],
)

R = TypeVar("R")


@attr.s(frozen=True, slots=True, auto_attribs=True)
class ApiIdAuth:
    api_id: ApiId

    def form_fields(self) -> FormFields:
        return [(ApiId.FIELD, self.api_id.value)]


@attr.s(frozen=True, slots=True, auto_attribs=True)
class LoginPasswordAuth:
    login: Login
    password: Password

    def form_fields(self) -> FormFields:
        return [
            (Login.FIELD, self.login.value),
            (Password.FIELD, self.password.value),
        ]


Auth = Union[ApiIdAuth, LoginPasswordAuth]


def _require_json(mode: JsonMode) -> None:
    if mode is not JsonMode.JSON:
        raise UnsupportedResponseFormatError(
            "Only JSON responses can be decoded, got %s" % (mode.value,)
        )


def _body_text(body: bytes) -> Optional[str]:
    text = body.decode("utf-8", "replace")
    if not text.strip():
        return None
    return text


class SmsRuClient:
    """Client for the SMS.RU HTTP API.

    Every method POSTs one form and decodes the JSON answer. A decoded answer
    with a top-level ``ERROR`` status is raised as :class:`ApiError`;
    per-recipient failures inside an ``OK`` answer are returned as data.

    :param auth: The credentials sent with every request.
    :param transport: Used to submit forms.
    :param endpoints: Where to send each method.
    """

    def __init__(
        self,
        auth: Auth,
        transport: FormTransport,
        endpoints: Optional[Endpoints] = None,
    ) -> None:
        self.auth = auth
        self.transport = transport
        self.endpoints = endpoints if endpoints is not None else Endpoints()

    @classmethod
    def from_config(
        cls, config: "SmsRuConfig", reactor: "IReactorTime"
    ) -> "SmsRuClient":
        """
        Build a client with a Twisted transport from a parsed config.

        :param config: The parsed configuration.
        :param reactor: The reactor to run requests on.
        """
        auth: Auth
        if config.auth.api_id is not None:
            auth = ApiIdAuth(config.auth.api_id)
        else:
            assert config.auth.login is not None
            assert config.auth.password is not None
            auth = LoginPasswordAuth(config.auth.login, config.auth.password)

        transport = TwistedFormTransport(
            reactor,
            timeout=config.http.timeout,
            connect_timeout=config.http.connect_timeout,
            user_agent=config.http.user_agent,
            max_body_size=config.http.max_body_size,
        )
        endpoints = Endpoints(
            base_url=config.http.base_url, overrides=config.http.endpoint_overrides
        )
        return cls(auth, transport, endpoints)

    async def _call(
        self, method: str, fields: FormFields, decode: Callable[[bytes], R]
    ) -> R:
        """
        POST a form to one of the API methods and decode the answer.

        :param method: The method's key in :data:`smsru.endpoints.ENDPOINT_PATHS`.
        :param fields: The method's own form fields, without credentials.
        :param decode: Turns the response body into a typed response.

        :return: The decoded response, if its status is ``OK``.
        """
        uri = self.endpoints.uri(method)
        fields = self.auth.form_fields() + fields

        logger.debug("HTTP POST %s -> %s", redact_form_fields(fields), uri)

        try:
            response = await self.transport.post_form(uri, fields)
        except Exception as e:
            requests_counter.labels(method, "transport_error").inc()
            logger.warning("Request to %s failed: %r", uri, e)
            raise TransportError("Request to %s failed: %s" % (uri, e)) from e

        if response.code < 200 or response.code >= 300:
            requests_counter.labels(method, "http_error").inc()
            logger.warning("SMS.RU responded to %s with HTTP %d", uri, response.code)
            raise HttpStatusError(response.code, _body_text(response.body))

        try:
            parsed: Any = decode(response.body)
        except DecodeError as e:
            requests_counter.labels(method, "parse_error").inc()
            logger.warning("Couldn't decode the response from %s: %s", uri, e)
            raise ParseError("Couldn't decode the response from %s: %s" % (uri, e)) from e

        if parsed.status is Status.ERROR:
            requests_counter.labels(method, "api_error").inc()
            logger.warning(
                "SMS.RU returned an error for %s: %d %s",
                uri,
                parsed.status_code.code,
                parsed.status_text,
            )
            raise ApiError(parsed.status_code, parsed.status_text)

        requests_counter.labels(method, "ok").inc()
        return parsed

    def _log_partial_failure(self, method: str, response: Any) -> None:
        failed = sum(1 for r in response.sms.values() if r.status is Status.ERROR)
        if failed:
            logger.info(
                "%s succeeded, but %d of %d items were refused",
                method,
                failed,
                len(response.sms),
            )

    async def send_sms(self, request: SendSms) -> SendSmsResponse:
        """
        Send one message to many recipients, or one message per recipient.

        :param request: The message(s) to send.

        :return: The balance after sending and a result per recipient. Check
            each recipient's status: some may have been refused.

        :raises UnsupportedResponseFormatError: if the request doesn't ask for
            JSON.
        :raises SmsRuError: if the request failed as a whole.
        """
        _require_json(request.options.json)
        response = await self._call(
            "sms_send",
            form.encode_send_sms_form(request),
            lambda body: sms.decode_send_sms_response(request, body),
        )
        self._log_partial_failure("sms_send", response)
        return response

    async def check_cost(self, request: CheckCost) -> CheckCostResponse:
        """Ask how much sending ``request`` would cost, without sending it."""
        _require_json(request.options.json)
        response = await self._call(
            "sms_cost",
            form.encode_check_cost_form(request),
            lambda body: sms.decode_check_cost_response(request, body),
        )
        self._log_partial_failure("sms_cost", response)
        return response

    async def check_status(self, request: CheckStatus) -> CheckStatusResponse:
        """Get the delivery status of previously sent messages."""
        response = await self._call(
            "sms_status",
            form.encode_check_status_form(request),
            lambda body: sms.decode_check_status_response(request, body),
        )
        self._log_partial_failure("sms_status", response)
        return response

    async def start_call_auth(self, request: StartCallAuth) -> StartCallAuthResponse:
        _require_json(request.options.json)
        return await self._call(
            "callcheck_add",
            form.encode_start_call_auth_form(request),
            callcheck.decode_start_call_auth_response,
        )

    async def check_call_auth_status(
        self, request: CheckCallAuthStatus
    ) -> CheckCallAuthStatusResponse:
        _require_json(request.options.json)
        return await self._call(
            "callcheck_status",
            form.encode_check_call_auth_status_form(request),
            callcheck.decode_check_call_auth_status_response,
        )

    async def check_auth(self) -> StatusOnlyResponse:
        """Check that the configured credentials are accepted."""
        return await self._call(
            "auth_check",
            form.encode_json_only_form(),
            account.decode_status_only_response,
        )

    async def get_balance(self) -> BalanceResponse:
        return await self._call(
            "my_balance", form.encode_json_only_form(), account.decode_balance_response
        )

    async def get_free_usage(self) -> FreeUsageResponse:
        return await self._call(
            "my_free", form.encode_json_only_form(), account.decode_free_usage_response
        )

    async def get_limit_usage(self) -> LimitUsageResponse:
        return await self._call(
            "my_limit", form.encode_json_only_form(), account.decode_limit_usage_response
        )

    async def get_senders(self) -> SendersResponse:
        return await self._call(
            "my_senders", form.encode_json_only_form(), account.decode_senders_response
        )

    async def add_stoplist_entry(self, request: AddStoplistEntry) -> StatusOnlyResponse:
        return await self._call(
            "stoplist_add",
            form.encode_add_stoplist_form(request),
            account.decode_status_only_response,
        )

    async def remove_stoplist_entry(
        self, request: RemoveStoplistEntry
    ) -> StatusOnlyResponse:
        return await self._call(
            "stoplist_del",
            form.encode_remove_stoplist_form(request),
            account.decode_status_only_response,
        )

    async def get_stoplist(self) -> StoplistResponse:
        return await self._call(
            "stoplist_get",
            form.encode_json_only_form(),
            stoplist.decode_stoplist_response,
        )

    async def add_callback(self, request: AddCallback) -> CallbacksResponse:
        """Register a URL for delivery reports.

        :return: All the URLs registered after the change.
        """
        return await self._call(
            "callback_add",
            form.encode_callback_form(request),
            callback.decode_callbacks_response,
        )

    async def remove_callback(self, request: RemoveCallback) -> CallbacksResponse:
        return await self._call(
            "callback_del",
            form.encode_callback_form(request),
            callback.decode_callbacks_response,
        )

    async def get_callbacks(self) -> CallbacksResponse:
        return await self._call(
            "callback_get",
            form.encode_json_only_form(),
            callback.decode_callbacks_response,
        )
