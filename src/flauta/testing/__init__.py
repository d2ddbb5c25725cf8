"""Test utilities for applications declaring routes with flauta::

    from flauta.testing import RecordingApp
"""

from flauta.testing.app import RecordingApp, Registration

__all__ = [
    "RecordingApp",
    "Registration",
]
