"""Domain layer for AEROCODE.

Contains business rules: the aircraft and employee records, their value
objects and enumerations, and the stage state machine. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `aerocode.adapters` or `aerocode.entrypoints`.
"""
