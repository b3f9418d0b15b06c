"""
AutoGroup North example business.

Handlers here are example payloads; the wiring lives in manifest.py.
"""

from .manifest import NAMESPACE, build_demo_manifest

__all__ = ["NAMESPACE", "build_demo_manifest"]
