"""Core catalog components: entities, store, change feed and generator."""
