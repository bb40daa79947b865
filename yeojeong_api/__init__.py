"""Yeojeong sample HTTP API."""
