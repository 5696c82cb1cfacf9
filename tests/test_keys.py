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

from smsru.domain.values import RawPhoneNumber, SmsId
from smsru.wire.errors import UnknownResponseKeyError
from smsru.wire.keys import KeyLookupTable


class KeyLookupTableTests(unittest.TestCase):
    def test_phone_key_variants(self) -> None:
        phone = RawPhoneNumber("+79251234567")
        table = KeyLookupTable.from_identifiers([phone])

        for key in ("+79251234567", "79251234567", " +79251234567 ", "79251234567\n"):
            self.assertIs(table.resolve(key), phone)

    def test_unknown_key(self) -> None:
        table = KeyLookupTable.from_identifiers([RawPhoneNumber("+79251234567")])
        with self.assertRaises(UnknownResponseKeyError) as cm:
            table.resolve("70000000000")
        self.assertEqual(cm.exception.key, "70000000000")

    def test_exact_form_beats_alternate(self) -> None:
        with_plus = RawPhoneNumber("+79251234567")
        without_plus = RawPhoneNumber("79251234567")

        for order in ([with_plus, without_plus], [without_plus, with_plus]):
            table = KeyLookupTable.from_identifiers(order)
            self.assertIs(table.resolve("+79251234567"), with_plus)
            self.assertIs(table.resolve("79251234567"), without_plus)

    def test_first_registration_wins_for_alternates(self) -> None:
        first = RawPhoneNumber("+79251234567")
        second = RawPhoneNumber(" +79251234567")
        table = KeyLookupTable.from_identifiers([first, second])

        self.assertIs(table.resolve("79251234567"), first)

    def test_ids_match_exactly(self) -> None:
        sms_id = SmsId("000000-10000000")
        table = KeyLookupTable.from_identifiers([sms_id])

        self.assertIs(table.resolve(" 000000-10000000 "), sms_id)
        self.assertRaises(UnknownResponseKeyError, table.resolve, "+000000-10000000")
