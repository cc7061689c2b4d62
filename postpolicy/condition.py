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
Condition clauses of POST policy. Each form field the browser submits
(except x-amz-signature, file, policy and fields with x-ignore- prefix) must
be matched by a condition. Condition elements and respective matching rules
are available at
https://docs.aws.amazon.com/AmazonS3/latest/API/sigv4-HTTPPOSTConstructPolicy.html#sigv4-PolicyConditions
"""

from __future__ import absolute_import, annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, NewType, Union

from typing_extensions import assert_never

from .error import InvalidConditionError, InvalidMatchKindError

ConditionKey = NewType("ConditionKey", str)

ACL = ConditionKey("acl")
BUCKET = ConditionKey("bucket")
CONTENT_LENGTH_RANGE = ConditionKey("content-length-range")
CACHE_CONTROL = ConditionKey("Cache-Control")
CONTENT_TYPE = ConditionKey("Content-Type")
CONTENT_DISPOSITION = ConditionKey("Content-Disposition")
CONTENT_ENCODING = ConditionKey("Content-Encoding")
EXPIRES = ConditionKey("Expires")
KEY = ConditionKey("key")
SUCCESS_ACTION_REDIRECT = ConditionKey("success_action_redirect")
REDIRECT = ConditionKey("redirect")
SUCCESS_ACTION_STATUS = ConditionKey("success_action_status")
AMZ_ALGORITHM = ConditionKey("x-amz-algorithm")
AMZ_CREDENTIAL = ConditionKey("x-amz-credential")
AMZ_DATE = ConditionKey("x-amz-date")
AMZ_SECURITY_TOKEN = ConditionKey("x-amz-security-token")
# User metadata and other x-amz-* headers are accepted as arbitrary keys.
AMZ_META_PREFIX = "x-amz-meta-"
AMZ_PREFIX = "x-amz-"

AWS_V4_SIGNATURE_ALGORITHM = "AWS4-HMAC-SHA256"

MAX_RANGE_VALUE = 2 ** 64 - 1

_EQ = "eq"
_STARTS_WITH = "starts-with"
_DECIMAL_REGEX = re.compile(r'[0-9]+')
_MAX_RANGE_DIGITS = len(str(MAX_RANGE_VALUE))


class ConditionMatch(Enum):
    """Match kind of a condition."""
    EXACT = "eq"
    STARTS_WITH = "starts-with"
    ANY = "any"
    RANGE = "range"

    def __str__(self) -> str:
        return self.value


def _check_key(key: str):
    """Check condition key is a string."""
    if not isinstance(key, str):
        raise InvalidConditionError("condition key must be str type")


def _check_value(value: str):
    """Check condition value is a string."""
    if not isinstance(value, str):
        raise InvalidConditionError("condition value must be str type")


def _check_bound(name: str, value: int):
    """Check range bound fits into unsigned 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConditionError(f"{name} must be int type")
    if value < 0:
        raise InvalidConditionError(f"{name} cannot be negative number")
    if value > MAX_RANGE_VALUE:
        raise InvalidConditionError(
            f"{name} cannot be greater than {MAX_RANGE_VALUE}",
        )


@dataclass(frozen=True)
class ExactCondition:
    """Form field must equal the value."""
    match: ClassVar[ConditionMatch] = ConditionMatch.EXACT

    key: str
    value: str

    def __post_init__(self):
        _check_key(self.key)
        _check_value(self.value)


@dataclass(frozen=True)
class StartsWithCondition:
    """Form field must begin with the value."""
    match: ClassVar[ConditionMatch] = ConditionMatch.STARTS_WITH

    key: str
    value: str

    def __post_init__(self):
        _check_key(self.key)
        _check_value(self.value)


@dataclass(frozen=True)
class AnyCondition:
    """Form field may hold any content."""
    match: ClassVar[ConditionMatch] = ConditionMatch.ANY

    key: str

    def __post_init__(self):
        _check_key(self.key)


@dataclass(frozen=True)
class RangeCondition:
    """
    Numeric form field, typically content-length-range, must be within
    inclusive lower and upper limits. Lower limit greater than upper limit is
    not rejected here; the service refuses such policy.
    """
    match: ClassVar[ConditionMatch] = ConditionMatch.RANGE

    key: str
    lower: int
    upper: int

    def __post_init__(self):
        _check_key(self.key)
        _check_bound("lower limit", self.lower)
        _check_bound("upper limit", self.upper)


Condition = Union[
    ExactCondition, StartsWithCondition, AnyCondition, RangeCondition,
]
CONDITION_TYPES = (
    ExactCondition, StartsWithCondition, AnyCondition, RangeCondition,
)


def new_value_condition(
        key: str,
        value: str,
        match: ConditionMatch = ConditionMatch.EXACT,
) -> Condition:
    """
    Create exact, starts-with or any condition. Value is ignored for any
    condition. Range match is rejected; use new_range_condition() for it.
    """
    if not isinstance(match, ConditionMatch):
        raise InvalidMatchKindError(match, "match must be ConditionMatch type")
    if match is ConditionMatch.EXACT:
        return ExactCondition(key, value)
    if match is ConditionMatch.STARTS_WITH:
        return StartsWithCondition(key, value)
    if match is ConditionMatch.ANY:
        return AnyCondition(key)
    if match is ConditionMatch.RANGE:
        raise InvalidMatchKindError(
            match,
            "range match is unsupported for value condition; "
            "use range condition instead",
        )
    assert_never(match)


def new_range_condition(key: str, lower: int, upper: int) -> RangeCondition:
    """Create range condition with inclusive lower and upper limits."""
    return RangeCondition(key, lower, upper)


def condition_tojson(condition: Condition) -> dict[str, str] | list[str]:
    """Convert condition to the JSON shape the service expects."""
    # {"acl": "public-read"}
    if isinstance(condition, ExactCondition):
        return {condition.key: condition.value}
    # ["starts-with", "$key", "user/user1/"]
    if isinstance(condition, StartsWithCondition):
        return [_STARTS_WITH, "$" + condition.key, condition.value]
    # ["starts-with", "$success_action_redirect", ""]
    if isinstance(condition, AnyCondition):
        return [_STARTS_WITH, "$" + condition.key, ""]
    # ["content-length-range", "1048579", "10485760"]
    if isinstance(condition, RangeCondition):
        return [condition.key, str(condition.lower), str(condition.upper)]
    assert_never(condition)


def _parse_bound(name: str, value: Any) -> int:
    """Parse range bound given as decimal string or integer."""
    if isinstance(value, str):
        if not _DECIMAL_REGEX.fullmatch(value):
            raise InvalidConditionError(
                f"{name} '{value}' is not a decimal number",
            )
        if len(value.lstrip("0")) > _MAX_RANGE_DIGITS:
            raise InvalidConditionError(
                f"{name} cannot be greater than {MAX_RANGE_VALUE}",
            )
        value = int(value)
    _check_bound(name, value)
    return value


def condition_fromjson(value: Any) -> Condition:
    """
    Create condition from its JSON shape. Besides the shapes produced by
    condition_tojson(), array form ["eq", "$key", "value"] is accepted as
    exact condition. Starts-with condition with empty value is read back as
    any condition.
    """
    if isinstance(value, dict):
        if len(value) != 1:
            raise InvalidConditionError(
                f"exact condition must have single entry; got {len(value)}",
            )
        key, val = next(iter(value.items()))
        return ExactCondition(key, val)

    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InvalidConditionError(f"unknown condition {value!r}")

    operator, element, val = value
    if operator not in (_EQ, _STARTS_WITH):
        return RangeCondition(
            operator,
            _parse_bound("lower limit", element),
            _parse_bound("upper limit", val),
        )

    if not isinstance(element, str) or not element.startswith("$"):
        raise InvalidConditionError(
            f"condition element {element!r} must start with '$'",
        )
    key = element[1:]
    if operator == _EQ:
        return ExactCondition(key, val)
    return AnyCondition(key) if val == "" else StartsWithCondition(key, val)
