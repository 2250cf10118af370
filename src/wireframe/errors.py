from __future__ import annotations


class WireframeError(Exception):
    """Base class for errors raised by the wireframe math and mesh code."""


class ArityMismatchError(WireframeError, ValueError):
    pass


class DegenerateVectorError(WireframeError, ValueError):
    pass


class InvalidFaceIndexError(WireframeError, IndexError):
    pass
