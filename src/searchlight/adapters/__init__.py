"""Adapters – integrations with query libraries (install the matching extra)."""
