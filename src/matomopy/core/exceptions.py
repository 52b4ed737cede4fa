"""Exceptions raised while validating and serializing tracking events."""


class MatomoError(Exception):
    """Base class for all errors raised by matomopy."""


class ValidationError(MatomoError):
    """A cross-field rule of a tracking event is violated."""


class ParameterConstraintError(MatomoError):
    """A single parameter value fails its regex, length or range constraint.

    Attributes:
        parameter: Wire key of the offending parameter (e.g. ``idsite``).
        constraint: Human readable description of the violated constraint.
    """

    def __init__(self, parameter: str, constraint: str) -> None:
        super().__init__(f"Invalid value for {parameter}. {constraint}")
        self.parameter = parameter
        self.constraint = constraint


class ConfigurationError(MatomoError, ValueError):
    """Tracker configuration or call arguments are unusable.

    Raised for malformed auth tokens, empty bulk requests and a missing
    site id.
    """
