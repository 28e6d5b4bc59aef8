"""Adapters layer - Concrete implementations of the ports.

Adapters connect the routing core to external data sources.

Structure:
- network/: Network loaders (JSON file, raw station list)
"""
