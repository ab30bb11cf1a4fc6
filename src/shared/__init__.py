"""
Shared Kernel Module
====================

Generic infrastructure used by every bounded context: structured logging and
HTTP middleware.

DO NOT add catalog business logic to the shared kernel.
"""

__version__ = "1.0.0"
