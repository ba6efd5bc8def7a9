"""Entry points (outer surfaces) of AEROCODE."""
