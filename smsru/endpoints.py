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

"""Where each SMS.RU method is POSTed to."""

from typing import Any, Dict

import attr

DEFAULT_BASE_URL = "https://sms.ru"

# Method name -> path under the base URL.
ENDPOINT_PATHS: Dict[str, str] = {
    "sms_send": "sms/send",
    "sms_cost": "sms/cost",
    "sms_status": "sms/status",
    "callcheck_add": "callcheck/add",
    "callcheck_status": "callcheck/status",
    "auth_check": "auth/check",
    "my_balance": "my/balance",
    "my_free": "my/free",
    "my_limit": "my/limit",
    "my_senders": "my/senders",
    "stoplist_add": "stoplist/add",
    "stoplist_del": "stoplist/del",
    "stoplist_get": "stoplist/get",
    "callback_add": "callback/add",
    "callback_del": "callback/del",
    "callback_get": "callback/get",
}


def _strip_trailing_slash(url: str) -> str:
    return url.rstrip("/")


def _known_methods(instance: Any, attribute: Any, value: Dict[str, str]) -> None:
    unknown = sorted(set(value) - set(ENDPOINT_PATHS))
    if unknown:
        raise ValueError("Unknown SMS.RU method(s): %s" % (", ".join(unknown),))


@attr.s(frozen=True, slots=True, auto_attribs=True)
class Endpoints:
    """The base URL of the API, plus full URLs for any method that should be
    sent somewhere else.
    """

    base_url: str = attr.ib(default=DEFAULT_BASE_URL, converter=_strip_trailing_slash)
    overrides: Dict[str, str] = attr.ib(
        factory=dict, validator=_known_methods, hash=False
    )

    def uri(self, method: str) -> str:
        """
        :param method: A key of :data:`ENDPOINT_PATHS`, e.g. ``"sms_send"``.

        :return: The URL to POST that method to.
        """
        override = self.overrides.get(method)
        if override is not None:
            return override
        return "%s/%s" % (self.base_url, ENDPOINT_PATHS[method])
