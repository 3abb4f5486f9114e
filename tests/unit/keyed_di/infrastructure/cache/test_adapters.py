"""Unit tests for cache adapters."""

from keyed_di.domain import ICacheAdapter
from keyed_di.infrastructure.cache import InMemoryCacheAdapter, MappingCacheAdapter


class TestMappingCacheAdapter:
    """Test cases for MappingCacheAdapter."""

    def test_implements_interface(self):
        """Test that the adapter is an ICacheAdapter."""
        assert isinstance(MappingCacheAdapter({}), ICacheAdapter)

    def test_set_writes_through_to_store(self):
        """Test that values land in the wrapped mapping."""
        store = {}
        adapter = MappingCacheAdapter(store)

        assert adapter.set("key", {"a": 1}) is True
        assert store == {"key": {"a": 1}}

    def test_get_reads_store(self):
        """Test that values already in the mapping are visible."""
        adapter = MappingCacheAdapter({"key": "value"})

        assert adapter.get("key") == "value"

    def test_get_missing_returns_default(self):
        """Test the default for a missing key."""
        adapter = MappingCacheAdapter({})

        assert adapter.get("missing") is None
        assert adapter.get("missing", "fallback") == "fallback"

    def test_has(self):
        """Test key presence."""
        adapter = MappingCacheAdapter({"key": None})

        assert adapter.has("key") is True
        assert adapter.has("missing") is False

    def test_delete(self):
        """Test that delete removes the key and reports success."""
        store = {"key": 1}
        adapter = MappingCacheAdapter(store)

        assert adapter.delete("key") is True
        assert store == {}

    def test_delete_missing_key_succeeds(self):
        """Test that deleting an absent key is not an error."""
        assert MappingCacheAdapter({}).delete("missing") is True


class TestInMemoryCacheAdapter:
    """Test cases for InMemoryCacheAdapter."""

    def test_round_trip(self):
        """Test storing and reading back a value."""
        adapter = InMemoryCacheAdapter()

        adapter.set("key", [1, 2])

        assert adapter.get("key") == [1, 2]
        assert adapter.has("key") is True

    def test_instances_do_not_share_values(self):
        """Test that each adapter owns its dict."""
        first = InMemoryCacheAdapter()
        second = InMemoryCacheAdapter()

        first.set("key", 1)

        assert second.has("key") is False

    def test_clear(self):
        """Test that clear removes every value."""
        adapter = InMemoryCacheAdapter()
        adapter.set("a", 1)
        adapter.set("b", 2)

        adapter.clear()

        assert adapter.has("a") is False
        assert adapter.has("b") is False
