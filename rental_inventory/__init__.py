"""Rental equipment inventory service."""

__all__ = []
