"""
VentureScope
Startup success probability estimation.
"""

__version__ = "0.1.0"
