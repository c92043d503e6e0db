"""Translation catalog projection and serialization."""
