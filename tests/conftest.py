"""Pytest configuration and fixtures for neo-counter-cache tests."""

from typing import Any, Dict, List, Set
from unittest.mock import AsyncMock

import pytest

from neo_counter_cache.core.exceptions import EntityNotFoundError
from neo_counter_cache.features.counter_cache.adapters.memory_adapter import MemoryAdapter
from neo_counter_cache.features.counter_cache.entities.binding import CounterCacheBinding
from neo_counter_cache.features.counter_cache.entities.config import CounterCacheConfig, ExpiryOptions
from neo_counter_cache.features.counter_cache.services.counter_cache import create_counter_cache
from neo_counter_cache.features.counter_cache.services.counter_cache_registry import CounterCacheRegistry


class InMemoryFavorites:
    """Parent and child tables standing in for the database."""
    
    def __init__(self):
        self.tweets: Set[Any] = set()
        self.favorites: List[Dict[str, Any]] = []
        self.count_calls = 0
    
    def add_tweet(self, tweet_id: Any) -> None:
        self.tweets.add(tweet_id)
    
    def add_favorite(self, tweet_id: Any) -> Dict[str, Any]:
        favorite = {"id": len(self.favorites) + 1, "tweet_id": tweet_id}
        self.favorites.append(favorite)
        return favorite
    
    def remove_favorite(self, favorite: Dict[str, Any]) -> None:
        self.favorites.remove(favorite)
    
    async def count(self, entity_type: str, association_name: str, parent_id: Any) -> int:
        self.count_calls += 1
        if parent_id not in self.tweets:
            raise EntityNotFoundError(entity_type, str(parent_id))
        return sum(1 for favorite in self.favorites if favorite["tweet_id"] == parent_id)


class FakeClock:
    """Manually advanced monotonic clock."""
    
    def __init__(self, now: float = 1000.0):
        self.now = now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds
    
    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_clock():
    """Controllable clock for expiry tests."""
    return FakeClock()


@pytest.fixture
def memory_store(fake_clock):
    """In-memory key-value store driven by the fake clock."""
    return MemoryAdapter(clock=fake_clock)


@pytest.fixture
def favorites_db():
    """Favorites table with three tweets: 1 has two favorites, 2 has none, 3 has one."""
    db = InMemoryFavorites()
    for tweet_id in (1, 2, 3):
        db.add_tweet(tweet_id)
    db.add_favorite(1)
    db.add_favorite(1)
    db.add_favorite(3)
    return db


@pytest.fixture
def favorites_binding():
    """Binding for Tweet.favorites with conventional defaults."""
    return CounterCacheBinding.create("Tweet", "favorites")


@pytest.fixture
def registry(favorites_binding, memory_store, favorites_db):
    """Counter cache registry over the memory store and fake database."""
    return CounterCacheRegistry(
        binding=favorites_binding,
        store=memory_store,
        count_query=favorites_db,
    )


@pytest.fixture
def counter_cache(memory_store, favorites_db):
    """Public counter cache handle for Tweet.favorites."""
    return create_counter_cache(
        "Tweet",
        "favorites",
        CounterCacheConfig(
            store=memory_store,
            count_query=favorites_db,
            expiry_options=ExpiryOptions.seconds(60),
        ),
    )


@pytest.fixture
def mock_store():
    """Mock key-value store for asserting store traffic."""
    store = AsyncMock()
    store.get = AsyncMock(return_value=None)
    store.set = AsyncMock(return_value=None)
    store.delete = AsyncMock(return_value=False)
    return store


@pytest.fixture
def mock_count_query():
    """Mock count query."""
    query = AsyncMock()
    query.count = AsyncMock(return_value=0)
    return query
