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
postpolicy.policy
~~~~~~~~~~~~~~~~~

This module contains :class:`PostPolicy <PostPolicy>` implementation.

:copyright: (c) 2026 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import base64
import json
from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Any, Optional, TextIO, Type, TypeVar

from .condition import (CONDITION_TYPES, Condition, ConditionMatch,
                        condition_fromjson, condition_tojson,
                        new_range_condition, new_value_condition)
from .error import InvalidConditionError, InvalidPolicyError
from .time import from_iso8601utc, to_iso8601utc, utcnow

_MAX_EXPIRY = timedelta(days=7)

A = TypeVar("A", bound="PostPolicy")


# Policy explanation:
# https://docs.aws.amazon.com/AmazonS3/latest/API/sigv4-HTTPPOSTConstructPolicy.html
class PostPolicy:
    """
    POST policy document authorizing a browser to upload an object directly
    to the object store. Conditions are kept in insertion order, which is the
    order of the serialized conditions array. Duplicate keys are allowed.

    Instances are not thread safe; serialize concurrent appends externally.
    """

    def __init__(self, expiration: datetime):
        if not isinstance(expiration, datetime):
            raise ValueError("expiration must be datetime type")
        self._expiration = expiration
        self._conditions: list[Condition] = []
        self._trace_stream: Optional[TextIO] = None

    @classmethod
    def expires_in(cls: Type[A], expires: timedelta = _MAX_EXPIRY) -> A:
        """Create new policy expiring after given duration from now."""
        if not isinstance(expires, timedelta):
            raise ValueError("expires must be timedelta type")
        if expires.total_seconds() < 1 or expires > _MAX_EXPIRY:
            raise ValueError(
                "expires must be between 1 second to 7 days",
            )
        return cls(utcnow() + expires)

    @property
    def expiration(self) -> datetime:
        """Get expiration."""
        return self._expiration

    @property
    def conditions(self) -> tuple[Condition, ...]:
        """Get conditions in insertion order."""
        return tuple(self._conditions)

    def add_condition(
            self,
            key: str,
            value: str,
            match: ConditionMatch = ConditionMatch.EXACT,
    ):
        """
        Add exact, starts-with or any condition of a form field. More than
        one condition may be added for the same field to build complex
        matching criteria.

        Raises :exc:`InvalidMatchKindError` for range match; use
        :meth:`add_range_condition` for it.
        """
        self._conditions.append(new_value_condition(key, value, match))

    def add_range_condition(self, key: str, lower: int, upper: int):
        """Add range condition, typically for content-length-range."""
        self._conditions.append(new_range_condition(key, lower, upper))

    def append(self, condition: Condition):
        """Add already created condition."""
        if not isinstance(condition, CONDITION_TYPES):
            raise InvalidConditionError(
                f"unknown condition type {type(condition).__name__}",
            )
        self._conditions.append(condition)

    def trace_on(self, stream: TextIO):
        """
        Enable policy trace.

        Args:
            stream (TextIO):
                Stream for writing serialized policy on every marshal().

        Example:
            >>> policy.trace_on(sys.stdout)
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        self._trace_stream = stream

    def trace_off(self):
        """Disable policy trace."""
        self._trace_stream = None

    def tojson(self) -> OrderedDict:
        """Convert to JSON-compatible dict."""
        policy: OrderedDict = OrderedDict()
        policy["expiration"] = to_iso8601utc(self._expiration)
        policy["conditions"] = [
            condition_tojson(condition) for condition in self._conditions
        ]
        return policy

    def marshal(self) -> bytes:
        """Serialize to UTF-8 encoded compact JSON."""
        data = json.dumps(
            self.tojson(), separators=(",", ":"), ensure_ascii=False,
        )
        if self._trace_stream:
            self._trace_stream.write("---------START-POLICY---------\n")
            self._trace_stream.write(data)
            self._trace_stream.write("\n")
            self._trace_stream.write("----------END-POLICY----------\n")
        return data.encode("utf-8")

    def base64(self) -> str:
        """Encode marshalled policy into base64 for signing."""
        return base64.b64encode(self.marshal()).decode("utf-8")

    @classmethod
    def fromjson(cls: Type[A], data: Any) -> A:
        """Create new policy from JSON-compatible dict."""
        if not isinstance(data, dict):
            raise InvalidPolicyError("policy must be JSON object")
        expiration = data.get("expiration")
        if not isinstance(expiration, str):
            raise InvalidPolicyError("expiration must be provided")
        try:
            obj = cls(from_iso8601utc(expiration))
        except ValueError as exc:
            raise InvalidPolicyError(
                f"invalid expiration '{expiration}'",
            ) from exc

        conditions = data.get("conditions", [])
        if not isinstance(conditions, list):
            raise InvalidPolicyError("conditions must be JSON array")
        for value in conditions:
            try:
                obj.append(condition_fromjson(value))
            except InvalidConditionError as exc:
                raise InvalidPolicyError(str(exc)) from exc
        return obj

    @classmethod
    def unmarshal(cls: Type[A], data: bytes | str) -> A:
        """Create new policy from serialized JSON."""
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            value = json.loads(data)
        except ValueError as exc:
            raise InvalidPolicyError(f"invalid policy JSON; {exc}") from exc
        return cls.fromjson(value)
