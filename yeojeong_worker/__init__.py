"""Yeojeong sample background worker."""
