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

import json
from unittest import TestCase

from postpolicy.condition import (ACL, AWS_V4_SIGNATURE_ALGORITHM,
                                  CONTENT_LENGTH_RANGE, KEY, MAX_RANGE_VALUE,
                                  SUCCESS_ACTION_REDIRECT, AnyCondition,
                                  ConditionMatch, ExactCondition,
                                  RangeCondition, StartsWithCondition,
                                  condition_fromjson, condition_tojson,
                                  new_range_condition, new_value_condition)
from postpolicy.error import (InvalidConditionError, InvalidMatchKindError,
                              PostPolicyException)


class ConditionToJsonTest(TestCase):
    def test_exact(self):
        condition = new_value_condition(ACL, "public-read")
        self.assertIsInstance(condition, ExactCondition)
        self.assertEqual(condition.match, ConditionMatch.EXACT)
        self.assertEqual(
            condition_tojson(condition), {"acl": "public-read"},
        )

    def test_exact_read_back(self):
        for key, value in [
                ("acl", "public-read"),
                ("x-amz-meta-uuid", "14365123651274"),
                ("Content-Type", ""),
                ("x-amz-meta-name", "żółw"),
        ]:
            with self.subTest(key=key):
                data = json.loads(json.dumps(
                    condition_tojson(ExactCondition(key, value)),
                ))
                condition = condition_fromjson(data)
                self.assertIsInstance(condition, ExactCondition)
                self.assertEqual(condition.key, key)
                self.assertEqual(condition.value, value)

    def test_starts_with(self):
        condition = new_value_condition(
            KEY, "user/user1/", ConditionMatch.STARTS_WITH,
        )
        self.assertIsInstance(condition, StartsWithCondition)
        self.assertEqual(
            condition_tojson(condition),
            ["starts-with", "$key", "user/user1/"],
        )

    def test_any_ignores_value(self):
        for value in ["", "http://example.com/"]:
            with self.subTest(value=value):
                condition = new_value_condition(
                    SUCCESS_ACTION_REDIRECT, value, ConditionMatch.ANY,
                )
                self.assertEqual(
                    condition, AnyCondition(SUCCESS_ACTION_REDIRECT),
                )
                self.assertEqual(
                    condition_tojson(condition),
                    ["starts-with", "$success_action_redirect", ""],
                )

    def test_range(self):
        condition = new_range_condition(
            CONTENT_LENGTH_RANGE, 1048579, 10485760,
        )
        self.assertEqual(condition.match, ConditionMatch.RANGE)
        self.assertEqual(
            condition_tojson(condition),
            ["content-length-range", "1048579", "10485760"],
        )

    def test_range_limits(self):
        condition = RangeCondition("content-length-range", 0, MAX_RANGE_VALUE)
        self.assertEqual(
            condition_tojson(condition),
            ["content-length-range", "0", "18446744073709551615"],
        )

    def test_range_lower_greater_than_upper(self):
        condition = new_range_condition(CONTENT_LENGTH_RANGE, 10, 1)
        self.assertEqual(
            condition_tojson(condition), ["content-length-range", "10", "1"],
        )

    def test_unknown_condition(self):
        self.assertRaises(AssertionError, condition_tojson, ("acl", "x"))

    def test_algorithm_value(self):
        self.assertEqual(
            condition_tojson(ExactCondition(
                "x-amz-algorithm", AWS_V4_SIGNATURE_ALGORITHM,
            )),
            {"x-amz-algorithm": "AWS4-HMAC-SHA256"},
        )


class NewConditionTest(TestCase):
    def test_value_condition_rejects_range(self):
        with self.assertRaises(InvalidMatchKindError) as ctx:
            new_value_condition(
                CONTENT_LENGTH_RANGE, "0", ConditionMatch.RANGE,
            )
        self.assertEqual(ctx.exception.match, ConditionMatch.RANGE)
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertIsInstance(ctx.exception, PostPolicyException)

    def test_value_condition_rejects_unknown_match(self):
        self.assertRaises(
            InvalidMatchKindError, new_value_condition, KEY, "x", "eq",
        )

    def test_invalid_key_or_value(self):
        self.assertRaises(
            InvalidConditionError, new_value_condition, None, "x",
        )
        self.assertRaises(
            InvalidConditionError, new_value_condition, KEY, 10,
        )
        self.assertRaises(
            InvalidConditionError, new_range_condition, 1, 0, 1,
        )

    def test_invalid_bounds(self):
        for lower, upper in [
                (-1, 10),
                (0, -1),
                (0, MAX_RANGE_VALUE + 1),
                ("0", 10),
                (0, 1.5),
                (True, 10),
        ]:
            with self.subTest(lower=lower, upper=upper):
                self.assertRaises(
                    InvalidConditionError,
                    new_range_condition,
                    CONTENT_LENGTH_RANGE,
                    lower,
                    upper,
                )

    def test_immutable(self):
        condition = ExactCondition(ACL, "private")
        with self.assertRaises(AttributeError):
            condition.value = "public-read"  # type: ignore[misc]

    def test_duplicate_keys_are_distinct_conditions(self):
        self.assertNotEqual(
            StartsWithCondition(KEY, "a/"), StartsWithCondition(KEY, "b/"),
        )


class ConditionFromJsonTest(TestCase):
    def test_array_shapes(self):
        for value, expected in [
                (
                    ["starts-with", "$key", "user/user1/"],
                    StartsWithCondition("key", "user/user1/"),
                ),
                (
                    ["starts-with", "$success_action_redirect", ""],
                    AnyCondition("success_action_redirect"),
                ),
                (
                    ["eq", "$bucket", "my-bucket"],
                    ExactCondition("bucket", "my-bucket"),
                ),
                (
                    ["content-length-range", "1048579", "10485760"],
                    RangeCondition("content-length-range", 1048579, 10485760),
                ),
                (
                    ["content-length-range", 1, 1048576],
                    RangeCondition("content-length-range", 1, 1048576),
                ),
                (
                    ["content-length-range", "0001", "18446744073709551615"],
                    RangeCondition("content-length-range", 1, MAX_RANGE_VALUE),
                ),
        ]:
            with self.subTest(value=value):
                self.assertEqual(condition_fromjson(value), expected)

    def test_invalid(self):
        for value in [
                {},
                {"acl": "private", "key": "a"},
                ["starts-with", "$key"],
                ["starts-with", "key", "a"],
                ["eq", 10, "a"],
                ["content-length-range", "-1", "10"],
                ["content-length-range", "1.5", "10"],
                ["content-length-range", "1", None],
                ["content-length-range", "5\n", "10"],
                ["content-length-range", "1", "10\n"],
                ["content-length-range", "1", "18446744073709551616"],
                ["content-length-range", "9" * 5000, "1"],
                [1, "1", "10"],
                "acl",
                None,
        ]:
            with self.subTest(value=value):
                self.assertRaises(
                    InvalidConditionError, condition_fromjson, value,
                )
