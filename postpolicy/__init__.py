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

"""
postpolicy - POST policy builder for Amazon S3 Compatible Cloud Storage

    >>> from datetime import timedelta
    >>> from postpolicy import ConditionMatch, PostPolicy
    >>> policy = PostPolicy.expires_in(timedelta(days=1))
    >>> policy.add_condition("bucket", "my-bucket")
    >>> policy.add_condition("key", "user/user1/", ConditionMatch.STARTS_WITH)
    >>> policy.add_range_condition("content-length-range", 1, 10485760)
    >>> encoded = policy.base64()

:copyright: (C) 2026 MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "postpolicy"
__author__ = "MinIO, Inc."
__version__ = "1.0.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2026 MinIO, Inc."

# pylint: disable=unused-import,useless-import-alias
from .condition import (
    AWS_V4_SIGNATURE_ALGORITHM as AWS_V4_SIGNATURE_ALGORITHM,
)
from .condition import AnyCondition as AnyCondition
from .condition import Condition as Condition
from .condition import ConditionKey as ConditionKey
from .condition import ConditionMatch as ConditionMatch
from .condition import ExactCondition as ExactCondition
from .condition import RangeCondition as RangeCondition
from .condition import StartsWithCondition as StartsWithCondition
from .condition import new_range_condition as new_range_condition
from .condition import new_value_condition as new_value_condition
from .error import InvalidConditionError as InvalidConditionError
from .error import InvalidMatchKindError as InvalidMatchKindError
from .error import InvalidPolicyError as InvalidPolicyError
from .error import PostPolicyException as PostPolicyException
from .policy import PostPolicy as PostPolicy
