"""AEROCODE

A command-line tool for tracking aircraft manufacturing: employees, aircraft,
parts, production stages, tests and delivery reports, persisted as JSON
documents on local disk.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
