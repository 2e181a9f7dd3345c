"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the text-processing core to its data sources:
- Airport reference table (CSV files)
- Style directives (user settings files)
"""
