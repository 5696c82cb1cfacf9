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

import copy
import logging
import os
from configparser import ConfigParser
from typing import Dict

from smsru.config.auth import AuthConfig
from smsru.config.exceptions import ConfigError
from smsru.config.general import GeneralConfig
from smsru.config.http import HTTPConfig
from smsru.endpoints import DEFAULT_BASE_URL
from smsru.http.httpcommon import DEFAULT_MAX_BODY_SIZE

logger = logging.getLogger(__name__)

CONFIG_DEFAULTS = {
    "general": {
        # Empty means log to stderr.
        "log.path": "",
        "log.level": "INFO",
    },
    "auth": {
        # Either api_id, or login and password.
        "api_id": os.environ.get("SMSRU_API_ID", ""),
        "login": "",
        "password": "",
    },
    "http": {
        "base_url": DEFAULT_BASE_URL,
        # In seconds. Empty means no timeout.
        "timeout": "30",
        "connect_timeout": "15",
        # Empty means smsru/<version>.
        "user_agent": "",
        "max_body_size": str(DEFAULT_MAX_BODY_SIZE),
        # Single methods can be sent to another URL, e.g. for testing:
        # 'endpoint.sms_send': 'https://sms.example.com/sms/send',
    },
}

__all__ = ["CONFIG_DEFAULTS", "ConfigError", "SmsRuConfig", "get_config_file_path"]


def get_config_file_path() -> str:
    return os.environ.get("SMSRU_CONF", "smsru.conf")


class SmsRuConfig:
    """This is the class in charge of handling the client's configuration.
    Handling of each individual section is delegated to other classes
    stored in a `config_sections` list.

    To use this class, create a new object and then call one of
    `parse_config_file` or `parse_config_dict`.
    """

    def __init__(self) -> None:
        self.general = GeneralConfig()
        self.auth = AuthConfig()
        self.http = HTTPConfig()

        self.config_sections = [
            self.general,
            self.auth,
            self.http,
        ]

    def parse_from_config_parser(self, cfg: ConfigParser) -> None:
        """
        Run the parse_config method on each of the objects in
        self.config_sections

        :param cfg: the configuration to be parsed
        """
        for section in self.config_sections:
            section.parse_config(cfg)

    def parse_config_file(self, config_file: str) -> None:
        """
        Parse the given config from a filepath, populating missing items and
        sections.

        :param config_file: the file to be parsed
        """
        if not os.path.exists(config_file):
            logger.info("No config file at %s, using defaults", config_file)

        # Passwords may contain '%', so no interpolation.
        cfg = ConfigParser(interpolation=None)
        for sect, entries in CONFIG_DEFAULTS.items():
            cfg.add_section(sect)
            for k, v in entries.items():
                cfg.set(sect, k, v)

        # Values from the file override the defaults.
        cfg.read(config_file)

        self.parse_from_config_parser(cfg)

    def parse_config_dict(self, config_dict: Dict[str, Dict[str, str]]) -> None:
        """
        Parse the given config from a dictionary, populating missing items and sections

        :param config_dict: the configuration dictionary to be parsed
        """
        # Build a config dictionary from the defaults merged with the given dictionary
        config = copy.deepcopy(CONFIG_DEFAULTS)
        for section, section_dict in config_dict.items():
            if section not in config:
                config[section] = {}
            for option in section_dict.keys():
                config[section][option] = config_dict[section][option]

        # Build a ConfigParser from the merged dictionary
        cfg = ConfigParser(interpolation=None)
        for section, section_dict in config.items():
            cfg.add_section(section)
            for option, value in section_dict.items():
                cfg.set(section, option, value)

        self.parse_from_config_parser(cfg)
