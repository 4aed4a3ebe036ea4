"""Mosaico puzzle ranking backend."""
