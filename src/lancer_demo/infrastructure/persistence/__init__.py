"""Persistence adapters for the seed tooling."""
