"""Unit tests for core engine logic."""
