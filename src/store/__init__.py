"""Profile and baseline asset storage layer.

This module resolves profiles, lists and writes baseline assets, and
tracks the display references derived from each listing.
"""
