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

import os
import re

from setuptools import find_packages, setup


def read_version():
    fn = os.path.join(os.path.dirname(__file__), "smsru", "__init__.py")
    with open(fn) as fp:
        f = fp.read()
    return re.search(r'^__version__ = "(.*)"', f, re.M).group(1)


# Utility function to read the README file, used for the long_description.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as fp:
        return fp.read()


setup(
    name="smsru",
    version=read_version(),
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Typed Twisted client for the SMS.RU HTTP API",
    python_requires=">=3.7",
    install_requires=[
        "Twisted>=22.1.0",
        # twisted warns about about the absence of this
        "service_identity>=1.0.0",
        "phonenumbers",
        "netaddr>=1.0.0",
        "pyopenssl",
        "attrs>=19.1.0",
        "prometheus_client>=0.4.0",
        "typing-extensions>=3.7.4",
    ],
    extras_require={
        "dev": [
            "flake8==3.9.2",
            "black==21.6b0",
            "isort==5.8.0",
            "mypy>=0.902",
            "mypy-zope>=0.3.1",
            "types-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "smsru = smsru.cli:main",
        ],
    },
    long_description=read("README.rst"),
)
