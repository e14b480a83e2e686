"""Errors raised while setting up or running a divider search."""


class DesignInputError(ValueError):
    """Configuration or catalog values that cannot produce a finite design."""
