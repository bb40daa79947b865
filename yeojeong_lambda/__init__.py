"""Yeojeong sample Lambda functions."""
