"""Bootstrap (composition root) for AEROCODE.

Assembles the application at runtime: wires concrete adapters to the
service-layer handlers, composes shared services (message bus, unit of work,
id generator, clock, report store) and reads configuration.

Import rules:
- Entry points build the application through *this* package (never from
  adapters directly); they drive it with `aerocode.service_layer` commands,
  views and errors.
- This package may import: `aerocode.adapters`, `aerocode.service_layer`,
  `aerocode.interfaces`, `aerocode.domain`, and `aerocode.config`.
- Inner layers must not import `aerocode.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
