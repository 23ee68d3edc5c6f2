"""Offer utilities shared across the package."""
