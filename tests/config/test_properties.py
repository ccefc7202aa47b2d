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
"""Tests for RedisProperties binding and provider detection."""

from flycache.config.auto import AutoConfiguration
from flycache.config.properties import RedisProperties
from flycache.core.config import Config


class TestRedisProperties:
    def test_bind_defaults(self):
        props = Config({}).bind(RedisProperties)
        assert props.host == "127.0.0.1"
        assert props.port == 6379
        assert props.database == 0
        assert props.password is None
        assert props.codec == "json"
        assert props.socket_timeout is None
        assert props.cluster_nodes == []

    def test_bind_custom_values(self):
        config = Config(
            {
                "flycache": {
                    "redis": {
                        "host": "redis.example.com",
                        "port": 6380,
                        "database": 4,
                        "password": "swordfish",
                        "codec": "pickle",
                        "socket_timeout": 0.25,
                    }
                }
            }
        )
        props = config.bind(RedisProperties)
        assert props.host == "redis.example.com"
        assert props.port == 6380
        assert props.database == 4
        assert props.password == "swordfish"
        assert props.codec == "pickle"
        assert props.socket_timeout == 0.25

    def test_cluster_nodes_from_env(self, monkeypatch):
        monkeypatch.setenv("FLYCACHE_REDIS_CLUSTER_NODES", "host1:7000,host2:7001")
        props = Config({}).bind(RedisProperties)
        assert props.cluster_nodes == ["host1:7000", "host2:7001"]

    def test_default_lists_are_not_shared(self):
        a = RedisProperties()
        a.cluster_nodes.append("x")
        assert RedisProperties().cluster_nodes == []


class TestAutoConfiguration:
    def test_is_available(self):
        assert AutoConfiguration.is_available("json") is True
        assert AutoConfiguration.is_available("no_such_module_flycache") is False

    def test_detect_parser_prefers_hiredis(self, monkeypatch):
        monkeypatch.setattr(AutoConfiguration, "is_available", staticmethod(lambda name: name == "hiredis"))
        assert AutoConfiguration.detect_parser() == "hiredis"

    def test_detect_parser_falls_back_to_python(self, monkeypatch):
        monkeypatch.setattr(AutoConfiguration, "is_available", staticmethod(lambda name: False))
        assert AutoConfiguration.detect_parser() == "python"
