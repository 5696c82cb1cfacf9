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

"""Mapping between the typed domain and the SMS.RU wire format: form
encoding of requests and JSON decoding of responses. Everything here is a
synchronous, side-effect free function.
"""

from smsru.wire.account import (
    decode_balance_response,
    decode_free_usage_response,
    decode_limit_usage_response,
    decode_senders_response,
    decode_status_only_response,
)
from smsru.wire.callback import decode_callbacks_response
from smsru.wire.callcheck import (
    decode_check_call_auth_status_response,
    decode_start_call_auth_response,
)
from smsru.wire.errors import (
    DecodeError,
    DuplicateResponseKeyError,
    InvalidEmbeddedValueError,
    InvalidScalarError,
    MalformedPayloadError,
    UnknownResponseKeyError,
)
from smsru.wire.sms import (
    decode_check_cost_response,
    decode_check_status_response,
    decode_send_sms_response,
)
from smsru.wire.stoplist import decode_stoplist_response

__all__ = [
    "DecodeError",
    "DuplicateResponseKeyError",
    "InvalidEmbeddedValueError",
    "InvalidScalarError",
    "MalformedPayloadError",
    "UnknownResponseKeyError",
    "decode_balance_response",
    "decode_callbacks_response",
    "decode_check_call_auth_status_response",
    "decode_check_cost_response",
    "decode_check_status_response",
    "decode_free_usage_response",
    "decode_limit_usage_response",
    "decode_send_sms_response",
    "decode_senders_response",
    "decode_start_call_auth_response",
    "decode_status_only_response",
    "decode_stoplist_response",
]
