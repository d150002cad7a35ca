"""
Tests for the DailyCache.
"""
import json

from wordwise.services.daily_cache import DailyCache, WORD_OF_THE_DAY_KEY

HOUR_MS = 60 * 60 * 1000


class FakeClock:
    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now


class TestDailyCache:
    """Tests for get/set and expiry"""

    def test_roundtrip_within_ttl(self, tmp_path):
        clock = FakeClock()
        cache = DailyCache(tmp_path / "cache.json", clock=clock)

        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Query"})
        clock.now += 23 * HOUR_MS

        assert cache.get(WORD_OF_THE_DAY_KEY) == {"word": "Query"}

    def test_expires_after_ttl(self, tmp_path):
        clock = FakeClock()
        cache = DailyCache(tmp_path / "cache.json", clock=clock)

        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Query"})
        clock.now += 24 * HOUR_MS

        assert cache.get(WORD_OF_THE_DAY_KEY) is None

    def test_future_timestamp_is_stale(self, tmp_path):
        clock = FakeClock()
        cache = DailyCache(tmp_path / "cache.json", clock=clock)
        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Query"})
        clock.now -= HOUR_MS

        assert cache.get(WORD_OF_THE_DAY_KEY) is None

    def test_missing_file(self, tmp_path):
        assert DailyCache(tmp_path / "missing.json").get(WORD_OF_THE_DAY_KEY) is None

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("{not json", encoding="utf-8")
        cache = DailyCache(path)

        assert cache.get(WORD_OF_THE_DAY_KEY) is None
        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Query"})
        assert cache.get(WORD_OF_THE_DAY_KEY) == {"word": "Query"}

    def test_entry_format(self, tmp_path):
        clock = FakeClock()
        path = tmp_path / "nested" / "cache.json"
        DailyCache(path, clock=clock).set(WORD_OF_THE_DAY_KEY, {"word": "Query"})

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {WORD_OF_THE_DAY_KEY: {"timestamp": clock.now, "value": {"word": "Query"}}}

    def test_keys_are_independent(self, tmp_path):
        cache = DailyCache(tmp_path / "cache.json")
        cache.set("a", {"n": 1})
        cache.set("b", {"n": 2})
        assert cache.get("a") == {"n": 1}
        assert cache.get("b") == {"n": 2}

    def test_write_replaces_file_without_leftovers(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text(json.dumps({"old": {"timestamp": 1, "value": {}}}), encoding="utf-8")
        cache = DailyCache(path)

        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Query"})

        assert [p.name for p in tmp_path.iterdir()] == ["cache.json"]
        data = json.loads(path.read_text(encoding="utf-8"))
        assert set(data) == {"old", WORD_OF_THE_DAY_KEY}

    def test_failed_write_keeps_previous_file(self, tmp_path, monkeypatch):
        path = tmp_path / "cache.json"
        cache = DailyCache(path)
        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Query"})
        before = path.read_text(encoding="utf-8")

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("wordwise.services.daily_cache.os.replace", fail_replace)
        cache.set(WORD_OF_THE_DAY_KEY, {"word": "Other"})

        assert path.read_text(encoding="utf-8") == before
        assert cache.get(WORD_OF_THE_DAY_KEY) == {"word": "Query"}
