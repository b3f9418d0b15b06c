"""
AutoGroup UCP - business capability registry and dispatch.
"""

__version__ = "0.1.0"
