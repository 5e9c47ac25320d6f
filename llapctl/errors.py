"""Errors raised while turning a command line into an LLAP configuration."""


class LlapOptionsError(Exception):
    """Base class for every options processing failure."""
    pass


class ParseSyntaxError(LlapOptionsError):
    """The argument vector does not follow the flag grammar."""
    pass


class FormatError(LlapOptionsError, ValueError):
    """A numeric or suffixed-size value could not be parsed."""
    pass


class ValidationError(LlapOptionsError, ValueError):
    """Coerced values violate a configuration invariant."""
    pass
