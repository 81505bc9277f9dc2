"""Cached Ethereum balance lookups over JSON-RPC."""
