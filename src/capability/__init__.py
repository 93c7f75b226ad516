"""Storage capability layer.

This module defines the directory and file handle ports the store
depends on, plus the local filesystem adapter and directory pickers.
"""
