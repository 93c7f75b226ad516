"""Command boundary between presentation and storage.

This module owns the current profile, its listing, and the busy guard
that serializes user-initiated storage commands.
"""
