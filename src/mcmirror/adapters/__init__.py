"""Adapters between the domain engine and external systems."""
