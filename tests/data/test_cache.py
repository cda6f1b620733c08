from unittest.mock import AsyncMock, patch

from redis.exceptions import RedisError

from gestionloc.data.cache import _cache_key, cached


def _counting():
    calls = []

    async def compute(x):
        calls.append(x)
        return {"value": x}

    return compute, calls


class TestCacheKey:
    def test_deterministic(self):
        assert _cache_key("p", {"b": 1, "a": 2}) == _cache_key("p", {"a": 2, "b": 1})

    def test_arguments_change_key(self):
        assert _cache_key("p", 1) != _cache_key("p", 2)
        assert _cache_key("p", 1).startswith("gestionloc:p:")


class TestCached:
    async def test_disabled_bypasses_redis(self):
        compute, calls = _counting()
        with (
            patch("gestionloc.data.cache.settings") as mock_settings,
            patch("gestionloc.data.cache.get_redis", new_callable=AsyncMock) as mock_redis,
        ):
            mock_settings.cache_enabled = False
            result = await cached("t")(compute)(1)
        assert result == {"value": 1}
        assert calls == [1]
        mock_redis.assert_not_called()

    async def test_hit_skips_computation(self):
        compute, calls = _counting()
        client = AsyncMock()
        client.get = AsyncMock(return_value='{"value": 99}')
        with (
            patch("gestionloc.data.cache.settings") as mock_settings,
            patch("gestionloc.data.cache.get_redis", new_callable=AsyncMock, return_value=client),
        ):
            mock_settings.cache_enabled = True
            result = await cached("t")(compute)(1)
        assert result == {"value": 99}
        assert calls == []

    async def test_miss_stores_result(self):
        compute, calls = _counting()
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        with (
            patch("gestionloc.data.cache.settings") as mock_settings,
            patch("gestionloc.data.cache.get_redis", new_callable=AsyncMock, return_value=client),
        ):
            mock_settings.cache_enabled = True
            mock_settings.cache_ttl_seconds = 300
            result = await cached("t")(compute)(1)
        assert result == {"value": 1}
        assert calls == [1]
        key, ttl, payload = client.setex.await_args.args
        assert key.startswith("gestionloc:t:")
        assert ttl == 300
        assert payload == '{"value": 1}'

    async def test_redis_down_still_computes(self):
        compute, calls = _counting()
        client = AsyncMock()
        client.get = AsyncMock(side_effect=RedisError("down"))
        client.setex = AsyncMock(side_effect=RedisError("down"))
        with (
            patch("gestionloc.data.cache.settings") as mock_settings,
            patch("gestionloc.data.cache.get_redis", new_callable=AsyncMock, return_value=client),
        ):
            mock_settings.cache_enabled = True
            result = await cached("t", ttl_seconds=10)(compute)(1)
        assert result == {"value": 1}
        assert calls == [1]
