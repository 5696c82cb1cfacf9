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
from typing import Optional

from smsru.config._base import BaseConfig
from smsru.config.exceptions import ConfigError
from smsru.domain.values import ApiId, Login, Password


class AuthConfig(BaseConfig):
    def parse_config(self, cfg: ConfigParser) -> None:
        """
        Parse the 'auth' section of the config. Exactly one of ``api_id``, or
        ``login`` and ``password``, must be set.

        :param cfg: the configuration to be parsed
        """
        api_id = cfg.get("auth", "api_id").strip()
        login = cfg.get("auth", "login").strip()
        password = cfg.get("auth", "password")

        self.api_id: Optional[ApiId] = None
        self.login: Optional[Login] = None
        self.password: Optional[Password] = None

        if api_id and (login or password):
            raise ConfigError(
                "Set either auth.api_id, or auth.login and auth.password, not both"
            )

        if api_id:
            self.api_id = ApiId(api_id)
        elif login and password:
            self.login = Login(login)
            self.password = Password(password)
        elif login or password:
            raise ConfigError("auth.login and auth.password must be set together")
        else:
            raise ConfigError(
                "No SMS.RU credentials: set auth.api_id (or SMSRU_API_ID), or "
                "auth.login and auth.password"
            )
