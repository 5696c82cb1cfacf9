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

from configparser import ConfigParser
from typing import Dict

from smsru.config._base import BaseConfig, parse_optional_float
from smsru.config.exceptions import ConfigError
from smsru.endpoints import ENDPOINT_PATHS
from smsru.http.httpclient import DEFAULT_USER_AGENT
from smsru.util.stringutils import is_valid_callback_url

ENDPOINT_OPTION_PREFIX = "endpoint."


class HTTPConfig(BaseConfig):
    def parse_config(self, cfg: ConfigParser) -> None:
        """
        Parse the http section of the config

        :param cfg: the configuration to be parsed
        """
        self.base_url = cfg.get("http", "base_url").strip()
        # Same rules as callback URLs: absolute http(s) with a host.
        if not is_valid_callback_url(self.base_url):
            raise ConfigError("Invalid http.base_url: %s" % (self.base_url,))

        try:
            self.timeout = parse_optional_float(cfg.get("http", "timeout"))
            self.connect_timeout = parse_optional_float(
                cfg.get("http", "connect_timeout")
            )
        except ValueError as e:
            raise ConfigError("Invalid http timeout: %s" % (e,))

        self.user_agent = cfg.get("http", "user_agent") or DEFAULT_USER_AGENT

        try:
            self.max_body_size = cfg.getint("http", "max_body_size")
        except ValueError as e:
            raise ConfigError("Invalid http.max_body_size: %s" % (e,))

        self.endpoint_overrides: Dict[str, str] = {}
        for opt in cfg.options("http"):
            if not opt.startswith(ENDPOINT_OPTION_PREFIX):
                continue

            method = opt[len(ENDPOINT_OPTION_PREFIX) :]
            if method not in ENDPOINT_PATHS:
                raise ConfigError(
                    "Unknown endpoint override %s: valid methods are %s"
                    % (opt, ", ".join(sorted(ENDPOINT_PATHS)))
                )
            self.endpoint_overrides[method] = cfg.get("http", opt).strip()
