from __future__ import annotations


class CopperheadError(Exception):
    pass


class InvalidConfiguration(CopperheadError, ValueError):
    """Raised at startup when the grid or timing settings cannot be used."""


class BoardFull(CopperheadError):
    """No free cell is left to place food on."""
