# Copyright 2026 Firefly Software Solutions Inc.
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
"""Tests for TTL normalization."""

from datetime import timedelta

import pytest

from flycache.cache.ttl import normalize_ttl
from flycache.kernel.exceptions import InvalidArgumentError


class TestNormalizeTtl:
    def test_none_means_no_expiry(self):
        assert normalize_ttl(None) is None

    def test_positive_int_unchanged(self):
        assert normalize_ttl(101) == 101

    @pytest.mark.parametrize("ttl", [0, -1, -3600])
    def test_non_positive_int_means_delete(self, ttl):
        assert normalize_ttl(ttl) == 0

    def test_timedelta_in_seconds(self):
        assert normalize_ttl(timedelta(seconds=202)) == 202
        assert normalize_ttl(timedelta(days=1, minutes=1)) == 86460

    def test_timedelta_fractions_are_truncated(self):
        assert normalize_ttl(timedelta(seconds=5, milliseconds=999)) == 5
        assert normalize_ttl(timedelta(milliseconds=500)) == 0

    def test_negative_timedelta_means_delete(self):
        assert normalize_ttl(timedelta(minutes=-5)) == 0

    @pytest.mark.parametrize(
        "ttl, type_name",
        [("303", "str"), (1.5, "float"), (True, "bool"), ([60], "list")],
    )
    def test_invalid_types(self, ttl, type_name):
        with pytest.raises(InvalidArgumentError) as exc_info:
            normalize_ttl(ttl)
        assert str(exc_info.value) == (
            f'Time-to-live must either be an integer, a timedelta or None, "{type_name}" given'
        )
