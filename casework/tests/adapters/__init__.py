"""Tests for adapter implementations.

These tests exercise adapters against real Python classes and modules
to validate the translation between marker tags, method lookups and the
core's ports.
"""
