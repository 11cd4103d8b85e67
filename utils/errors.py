"""Codec errors."""


class InvalidArgumentError(ValueError):
    """Caller input rejected before any computation takes place."""
