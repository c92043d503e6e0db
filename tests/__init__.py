"""Test suite for gettext-tasks."""
