"""Outbound ports that the service layer depends on.

Adapters in `aerocode.adapters` provide the concrete implementations.
"""

import os

PathLike = str | os.PathLike[str]
