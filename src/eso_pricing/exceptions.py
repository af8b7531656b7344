from __future__ import annotations


class ParameterError(ValueError):
    """Raised when a raw input fails validation on the strict construction path.

    Every subclass records which parameter was rejected and the offending value,
    so callers can report the failure without parsing the message.

    Attributes
    ----------
    parameter : str
        Name of the rejected parameter (e.g. ``"strike_price"``).
    value : float
        The value that was rejected.
    """

    def __init__(self, parameter: str, value: float, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class InvalidNonNegativeValueError(ParameterError):
    """A price, time or multiple was negative or not finite."""

    def __init__(self, parameter: str, value: float) -> None:
        super().__init__(
            parameter, value, f"{parameter} must be non-negative and finite, got {value}"
        )


class InvalidStepCountError(ParameterError):
    """The lattice step count was not a positive integer."""

    def __init__(self, parameter: str, value: int) -> None:
        super().__init__(parameter, value, f"{parameter} must be positive, got {value}")


class InvalidVolatilityError(ParameterError):
    """Volatility was zero, negative or not finite."""

    def __init__(self, value: float, parameter: str = "sigma") -> None:
        super().__init__(
            parameter, value, f"{parameter} must be positive and finite, got {value}"
        )


class InvalidRateError(ParameterError):
    """A rate was not strictly inside the open interval (0, 1)."""

    def __init__(self, parameter: str, value: float) -> None:
        super().__init__(
            parameter, value, f"{parameter} must be between 0 and 1, got {value}"
        )
