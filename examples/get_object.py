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

# Note: S3_REGION, S3_HOST, S3_BUCKET, S3_ACCESS_KEY, S3_SECRET_KEY and
# optional S3_SCHEME environment variables configure the client.

import urllib3

from objsto import Config

client = Config.from_env().new(http_client=urllib3.PoolManager(timeout=30))

# Get data of an object.
response = None
try:
    response = client.get_object("demo.txt")
    with open("demo.txt", "wb") as file_data:
        for data in response.stream(32*1024):
            file_data.write(data)
finally:
    if response:
        response.close()
        response.release_conn()
