"""
Crime journal persistence core.

Layers: UI shell -> view-models -> CrimeRepository -> store functions ->
SQLAlchemy models. `CrimeIntentApp.initialize()` wires them together.
"""

__version__ = "0.2.0"
