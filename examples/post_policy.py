# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage,
# (C) 2026 MinIO, Inc.
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

import sys
from datetime import timedelta

from postpolicy import AWS_V4_SIGNATURE_ALGORITHM, ConditionMatch, PostPolicy

policy = PostPolicy.expires_in(timedelta(days=1))
policy.add_condition("bucket", "my-bucket")
policy.add_condition("acl", "public-read")
policy.add_condition("key", "my/object/prefix/", ConditionMatch.STARTS_WITH)
policy.add_condition("success_action_redirect", "", ConditionMatch.ANY)
policy.add_range_condition("content-length-range", 1*1024*1024, 10*1024*1024)
policy.add_condition("x-amz-algorithm", AWS_V4_SIGNATURE_ALGORITHM)

policy.trace_on(sys.stderr)

# Hand the encoded policy to your SignatureV4 signer and upload form.
print(policy.base64())
