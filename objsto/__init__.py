# -*- coding: utf-8 -*-
# objsto, minimal Python client for Amazon S3 Compatible Cloud Storage,
# (C) 2026 objsto authors.
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

"""
objsto - minimal Python client for Amazon S3 Compatible Cloud Storage

    >>> import io
    >>> from objsto import Config
    >>> client = Config(
    ...     region="us-east-1",
    ...     host="play.min.io",
    ...     bucket="my-bucket",
    ...     access_key="Q3AM3UQ867SPQQA43P2F",
    ...     secret_key="zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG",
    ... ).new()
    >>> client.put_object("hello.txt", io.BytesIO(b"hello"))
    >>> response = client.get_object("hello.txt")
    >>> print(response.read())

:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "objsto"
__author__ = "objsto authors"
__version__ = "0.1.0"
__license__ = "Apache 2.0"

# pylint: disable=unused-import,useless-import-alias
from .api import Client as Client
from .config import Config as Config
from .error import ConfigError as ConfigError
from .error import HashError as HashError
from .error import HttpError as HttpError
from .error import ObjstoError as ObjstoError
from .error import S3Error as S3Error
from .error import SeekError as SeekError
from .error import TransportError as TransportError
from .error import ValidationError as ValidationError
from .logger import Logger as Logger
from .logger import StdLogger as StdLogger
from .redact import Redact as Redact
