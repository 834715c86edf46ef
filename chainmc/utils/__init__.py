"""Utility functions for values, progress bars and such."""
