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

from abc import ABC, abstractmethod
from configparser import ConfigParser
from typing import Optional


class BaseConfig(ABC):
    @abstractmethod
    def parse_config(self, cfg: ConfigParser) -> None:
        """
        Parse a section of the config

        :param cfg: the configuration to be parsed

        :raises ConfigError: if the section holds an invalid value.
        """
        pass


def parse_optional_float(value: str) -> Optional[float]:
    """
    Parse a string config option into a float, where an empty string means
    "not set"

    :param value: the string to be parsed
    """
    value = value.strip()
    if value == "":
        return None
    return float(value)
