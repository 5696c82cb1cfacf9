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

import re
from typing import Iterable
from urllib.parse import urlsplit

from twisted.internet.abstract import isIPAddress, isIPv6Address

# hostname/domain name
# https://regex101.com/r/OyN1lg/2
hostname_regex = re.compile(
    r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*$",
    flags=re.IGNORECASE,
)

CALLBACK_URL_SCHEMES = ("http", "https")

# Form fields whose values must never end up in a log line.
SECRET_FORM_FIELDS = frozenset(("api_id", "password"))


def is_valid_hostname(string: str) -> bool:
    """Validate that a given string is a valid hostname or domain name.

    For domain names, this only validates that the form is right (for
    instance, it doesn't check that the TLD is valid).

    :param string: The string to validate

    :return: Whether the input is a valid hostname
    """

    return hostname_regex.match(string) is not None


def is_valid_ip_address(string: str) -> bool:
    """Validate that a given string is an IPv4 or IPv6 address literal.

    :param string: The string to validate

    :return: Whether the input is an IP address
    """
    return isIPAddress(string) or isIPv6Address(string)


def is_valid_callback_url(string: str) -> bool:
    """Validate that a given string is an absolute http(s) URL that SMS.RU can
    deliver status callbacks to.

    :param string: The string to validate

    :return: Whether the input is usable as a callback URL
    """
    if any(c.isspace() for c in string):
        return False

    try:
        parts = urlsplit(string)
        # Accessing the port validates it.
        parts.port
    except ValueError:
        return False

    if parts.scheme not in CALLBACK_URL_SCHEMES:
        return False

    host = parts.hostname
    if not host:
        return False

    return is_valid_ip_address(host) or is_valid_hostname(host)


def redact_form_fields(fields: Iterable[Iterable[str]]) -> str:
    """Render form fields for a log line, hiding credentials.

    :param fields: The (name, value) pairs about to be submitted.

    :return: A printable representation of the fields.
    """
    rendered = []
    for name, value in fields:
        if name in SECRET_FORM_FIELDS:
            value = "<redacted>"
        rendered.append("%s=%s" % (name, value))
    return "&".join(rendered)
