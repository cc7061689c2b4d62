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

"""Time formatter for POST policy documents."""

from __future__ import absolute_import, annotations

from datetime import datetime, timezone

try:
    from datetime import UTC  # type: ignore[attr-defined]
    _UTC_IMPORTED = True
except ImportError:
    _UTC_IMPORTED = False

# Wire format of policy expiration; always millisecond precision.
_ISO8601_MILLIS_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
_ISO8601_SECONDS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _to_utc(value: datetime) -> datetime:
    """Convert to naive UTC time; naive value is taken as UTC already."""
    return (
        value.astimezone(timezone.utc).replace(tzinfo=None)
        if value.tzinfo else value
    )


def to_iso8601utc(value: datetime) -> str:
    """
    Format datetime into UTC ISO-8601 string with exactly three fractional
    digits. Sub-millisecond precision is truncated.
    """
    if not isinstance(value, datetime):
        raise ValueError("value must be datetime type")

    value = _to_utc(value)
    return (
        f"{value.year:04d}" + value.strftime("-%m-%dT%H:%M:%S.") +
        value.strftime("%f")[:3] + "Z"
    )


def from_iso8601utc(value: str) -> datetime:
    """Parse UTC ISO-8601 formatted string to datetime."""
    try:
        time = datetime.strptime(value, _ISO8601_MILLIS_FORMAT)
    except ValueError:
        time = datetime.strptime(value, _ISO8601_SECONDS_FORMAT)
    return time.replace(tzinfo=timezone.utc)


def utcnow() -> datetime:
    """Timezone-aware wrapper to datetime.utcnow()."""
    if _UTC_IMPORTED:
        return datetime.now(UTC).replace(tzinfo=timezone.utc)
    return datetime.utcnow().replace(tzinfo=timezone.utc)
