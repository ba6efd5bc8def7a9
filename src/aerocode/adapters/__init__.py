"""Adapters implementing the ports defined in `aerocode.interfaces`."""
