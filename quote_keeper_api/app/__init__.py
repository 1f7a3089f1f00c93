"""
Application package initializer.

The record store is organised into small layers: ``core`` (settings,
logging, identity, clock, errors and the SQLite bootstrap),
``storage`` (keyed collections), ``schemas`` (record and payload
models), ``services`` (lifecycle and query logic) and ``api``
(versioned HTTP routes).
"""

from .main import app  # noqa: F401
