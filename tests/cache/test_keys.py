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
"""Tests for key normalization and host validation helpers."""

import sys

import pytest

from flycache.cache.keys import (
    ensure_key_sequence,
    is_valid_host,
    is_valid_key,
    is_valid_keys_sequence,
    normalize_key,
    normalize_keys,
    validate_host,
)
from flycache.kernel.exceptions import InvalidArgumentError


class TestNormalizeKey:
    @pytest.mark.parametrize("key", ["key", "user.42", "A_b.C_9", "x" * 300])
    def test_valid_keys_are_unchanged(self, key):
        assert normalize_key(key) == key

    def test_integer_is_coerced(self):
        assert normalize_key(2) == "2"

    @pytest.mark.parametrize("key", ["key", 17, "a.b_c"])
    def test_idempotent(self, key):
        once = normalize_key(key)
        assert normalize_key(once) == once

    def test_empty_key(self):
        with pytest.raises(InvalidArgumentError, match="Given key is empty!"):
            normalize_key("")

    @pytest.mark.parametrize("key", ["not_a_valid_key!", "a b", "a-b", "{}()/\\@:", "ümlaut", "key\n"])
    def test_invalid_characters(self, key):
        with pytest.raises(InvalidArgumentError, match="Invalid key given"):
            normalize_key(key)

    def test_negative_integer_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Invalid key given: '-3'"):
            normalize_key(-3)

    @pytest.mark.skipif(sys.get_int_max_str_digits() == 0, reason="int digit limit disabled")
    def test_integer_over_digit_limit_is_rejected(self):
        key = 10 ** (sys.get_int_max_str_digits() + 1)
        with pytest.raises(InvalidArgumentError, match="Invalid key given"):
            normalize_key(key)
        assert is_valid_key(key) is False

    @pytest.mark.parametrize("key, type_name", [(True, "bool"), (None, "NoneType"), (1.0, "float")])
    def test_wrong_type(self, key, type_name):
        with pytest.raises(InvalidArgumentError) as exc_info:
            normalize_key(key)
        assert str(exc_info.value) == f'Expected key to be a string, "{type_name}" given!'
        assert exc_info.value.code == "INVALID_ARGUMENT"

    def test_is_valid_key(self):
        assert is_valid_key("ok") is True
        assert is_valid_key("not ok") is False
        assert is_valid_key(False) is False


class TestKeySequences:
    @pytest.mark.parametrize("keys", [[], ["key1", "key2"], ("key",), {"a", "b"}, (k for k in ["a"])])
    def test_valid_shapes(self, keys):
        assert is_valid_keys_sequence(keys) is True

    @pytest.mark.parametrize("keys", [object(), {"key1": "value"}, True, "key1, key2", b"key"])
    def test_invalid_shapes(self, keys):
        assert is_valid_keys_sequence(keys) is False

    def test_shape_check_does_not_consume_generators(self):
        gen = (k for k in ["a", "b"])
        assert is_valid_keys_sequence(gen) is True
        assert ensure_key_sequence(gen) == ["a", "b"]

    def test_ensure_key_sequence_message(self):
        with pytest.raises(InvalidArgumentError, match="Keys must be an iterable of keys, str given!"):
            ensure_key_sequence("key1, key2")

    def test_normalize_keys(self):
        assert normalize_keys(["a", 1]) == ["a", "1"]

    def test_normalize_keys_aborts_on_first_invalid(self):
        with pytest.raises(InvalidArgumentError):
            normalize_keys(["a", "b c", "d"])


class TestHostValidation:
    @pytest.mark.parametrize(
        "host",
        ["127.0.0.1", "192.168.100.254", "redis-server", "redis.example.com", "::1", "fe80::1", "a--b"],
    )
    def test_valid_hosts(self, host):
        assert is_valid_host(host) is True

    @pytest.mark.parametrize(
        "host",
        [
            "",
            "{abc",
            "abc/def",
            "invalid..hostname",
            "bad host",
            "-leading",
            "trailing-",
            "this-sure-looks-valid-but-is-not-because-it-is-far-too-long-for-a-label.com",
            ".".join(["abcdefghij"] * 24),
            None,
            42,
        ],
    )
    def test_invalid_hosts(self, host):
        assert is_valid_host(host) is False

    def test_validate_host_returns_host(self):
        assert validate_host("redis.example.com") == "redis.example.com"

    def test_validate_host_quotes_rejected_value(self):
        with pytest.raises(InvalidArgumentError, match="Invalid hostname/IP given: 'bad host'"):
            validate_host("bad host")
