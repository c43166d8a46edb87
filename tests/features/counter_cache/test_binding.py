"""Tests for counter cache bindings and naming defaults."""

import pytest

from neo_counter_cache.core.exceptions import ConfigurationError
from neo_counter_cache.features.counter_cache.entities.binding import CounterCacheBinding


class TestCounterCacheBinding:
    """Test binding creation."""
    
    def test_defaults(self):
        """Test conventional accessor and foreign key names."""
        binding = CounterCacheBinding.create("Tweet", "favorites")
        
        assert binding.counter_method_name == "favorites_count"
        assert binding.clear_method_name == "clear_favorites_count"
        assert binding.owner_table == "tweets"
        assert binding.foreign_key == "tweet_id"
        assert binding.name == "Tweet.favorites"
    
    def test_camel_case_entity(self):
        """Test default names for multi-word entity types."""
        binding = CounterCacheBinding.create("BlogCategory", "posts")
        
        assert binding.owner_table == "blog_categories"
        assert binding.foreign_key == "blog_category_id"
    
    def test_explicit_owner_table(self):
        """Test the foreign key follows an explicit owner table."""
        binding = CounterCacheBinding.create("Person", "addresses", owner_table="people_records")
        assert binding.foreign_key == "people_record_id"
    
    def test_overrides(self):
        """Test explicit accessor name and foreign key."""
        binding = CounterCacheBinding.create(
            "Tweet",
            "favorites",
            counter_method_name="likes",
            foreign_key="status_id",
        )
        
        assert binding.counter_method_name == "likes"
        assert binding.clear_method_name == "clear_likes"
        assert binding.foreign_key == "status_id"
    
    def test_immutable(self):
        """Test bindings cannot change after creation."""
        binding = CounterCacheBinding.create("Tweet", "favorites")
        with pytest.raises(AttributeError):
            binding.foreign_key = "other_id"
    
    @pytest.mark.parametrize("entity_type,association_name", [
        ("", "favorites"),
        ("Tweet", ""),
        ("   ", "favorites"),
    ])
    def test_empty_names_rejected(self, entity_type, association_name):
        """Test that empty names are configuration errors."""
        with pytest.raises(ConfigurationError):
            CounterCacheBinding.create(entity_type, association_name)
