"""dwrgen - TypeScript contracts for DWR remoting backends.

dwrgen turns a manifest of scanned backend types (transfer objects,
enumerations and remote services) into TypeScript interfaces and
Angular client stubs, so the front-end always compiles against the
current backend contracts.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
