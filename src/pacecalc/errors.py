"""Exception types for pacecalc."""


class PaceCalcError(Exception):
    """Base class for pacecalc errors."""


class InvalidInputError(PaceCalcError, ValueError):
    """Input a caller asked us to convert cannot be converted."""


class StoreError(PaceCalcError):
    """History or favorites could not be written."""
