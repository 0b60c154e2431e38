"""Tests for the draftmachine package."""
