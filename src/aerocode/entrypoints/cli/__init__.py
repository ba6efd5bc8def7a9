"""Command-line interface for AEROCODE."""
