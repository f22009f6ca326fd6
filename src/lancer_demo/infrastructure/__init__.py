"""Infrastructure adapters for the seed tooling."""
