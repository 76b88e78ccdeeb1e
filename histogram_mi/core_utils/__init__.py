"""Shared helpers: exceptions and input validation."""
