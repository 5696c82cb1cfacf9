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

"""Errors raised while decoding SMS.RU response bodies.

A body that decodes to a top-level ``ERROR`` envelope is *not* a decode error;
these are only raised when a body cannot be turned into a typed response.
"""

from typing import Any


class DecodeError(Exception):
    """Base class for response decoding failures."""


class MalformedPayloadError(DecodeError):
    """The body is not a JSON object of the expected shape."""


class InvalidScalarError(DecodeError):
    """A JSON value could not be read as the scalar the field needs."""

    def __init__(self, expected: str, value: Any) -> None:
        super().__init__("expected %s, got %r" % (expected, value))
        self.expected = expected
        self.value = value


class UnknownResponseKeyError(DecodeError):
    """A per-item key in the response matches none of the request's
    identifiers.
    """

    def __init__(self, key: str) -> None:
        super().__init__("response key does not match the request: %r" % (key,))
        self.key = key


class InvalidEmbeddedValueError(DecodeError):
    """A response field failed the validation of the value type it carries."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__("response contains invalid %s: %r" % (field, value))
        self.field = field
        self.value = value


class DuplicateResponseKeyError(DecodeError):
    """Two per-item keys in the response refer to the same request identifier."""

    def __init__(self, key: str) -> None:
        super().__init__("response key repeats an earlier item: %r" % (key,))
        self.key = key
