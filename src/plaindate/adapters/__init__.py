"""Serialization adapters for plaindate values."""
