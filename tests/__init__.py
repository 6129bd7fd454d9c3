"""Tests for chartgen."""
