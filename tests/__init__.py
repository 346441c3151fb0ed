"""Tests for prefixint."""
