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

"""Correlation of per-item response keys with the identifiers of a request.

SMS.RU does not always echo identifiers back byte for byte: phone numbers may
gain or lose their leading ``+`` and keys may carry stray whitespace. A
:class:`KeyLookupTable` maps every form a key may take back to the identifier
the caller used.
"""

from typing import Dict, Generic, Iterable, TypeVar

from typing_extensions import Protocol

from smsru.wire.errors import UnknownResponseKeyError


class Identifier(Protocol):
    def recognized_forms(self) -> Iterable[str]:
        """The exact form first, then any alternates."""
        ...


T = TypeVar("T", bound=Identifier)


class KeyLookupTable(Generic[T]):
    """Resolves response keys to request identifiers.

    Built for a single decode call and then discarded.
    """

    def __init__(self) -> None:
        self._by_form: Dict[str, T] = {}

    @classmethod
    def from_identifiers(cls, identifiers: Iterable[T]) -> "KeyLookupTable[T]":
        """
        Build a table for the identifiers of one request.

        The exact form of every identifier is registered before any alternate
        form, so an identifier's own text always resolves to it even when
        another identifier has that text as an alternate.

        :param identifiers: The identifiers, in request order.
        """
        table: "KeyLookupTable[T]" = cls()
        identifiers = list(identifiers)
        for identifier in identifiers:
            exact = next(iter(identifier.recognized_forms()))
            table._by_form.setdefault(exact, identifier)
        for identifier in identifiers:
            table.register(identifier)
        return table

    def register(self, identifier: T) -> None:
        # A form already claimed keeps its identifier.
        for form in identifier.recognized_forms():
            self._by_form.setdefault(form, identifier)

    def resolve(self, key: str) -> T:
        """
        Find the request identifier a response key refers to.

        :param key: The key as it appears in the response.

        :return: The matching identifier.

        :raises UnknownResponseKeyError: if no identifier matches.
        """
        for candidate in (key.strip(), key):
            identifier = self._by_form.get(candidate)
            if identifier is not None:
                return identifier
        raise UnknownResponseKeyError(key)

    def __len__(self) -> int:
        return len(self._by_form)
