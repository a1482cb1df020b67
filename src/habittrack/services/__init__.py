"""Service module exports.

``reports`` pulls in matplotlib and is imported on demand by chart views.
"""

from . import habits

__all__ = ["habits"]
