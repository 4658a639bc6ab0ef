"""FCU to JSON - MERG CBUS configuration converter.

This package reads FCU (FLiM Configuration Utility) XML layout files and
produces JSON describing the named states of locally owned CBUS events.
"""

__version__ = "0.1.0"
