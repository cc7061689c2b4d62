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
postpolicy.error
~~~~~~~~~~~~~~~~

This module provides custom exception classes for building and reading
POST policy documents.

:copyright: (c) 2026 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations


class PostPolicyException(Exception):
    """Base POST policy exception."""


class InvalidConditionError(PostPolicyException, ValueError):
    """Raised to indicate a malformed condition key, value or bound."""


class InvalidMatchKindError(PostPolicyException, ValueError):
    """
    Raised to indicate that a match kind was used with a constructor which
    cannot carry its payload, e.g. range match passed as value condition.
    """

    def __init__(self, match: object, message: str | None = None):
        self._match = match
        super().__init__(
            message or f"match kind {match} is unsupported here",
        )

    def __reduce__(self):
        return type(self), (self._match, str(self))

    @property
    def match(self) -> object:
        """Get offending match kind."""
        return self._match


class InvalidPolicyError(PostPolicyException, ValueError):
    """Raised to indicate that a policy document cannot be parsed."""
