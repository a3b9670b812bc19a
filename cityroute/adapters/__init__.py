"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Graph storage (CSV files)
- Search strategies over the in-memory graph
"""
