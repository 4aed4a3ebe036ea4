"""HTTP surface of the ranking service."""
