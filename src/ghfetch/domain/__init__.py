"""Domain types and pure asset selection logic."""
