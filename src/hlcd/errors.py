"""
Error Taxonomy

All errors raised by the package derive from ``HLCDError``. Validation is
performed once, at the boundary (parameters, configuration, files); the
arithmetic in the search hot path never raises.
"""


class HLCDError(ValueError):
    """Base class for every error raised by the package."""


class InvalidBaseError(HLCDError):
    """The base is not 2 or 4."""

    def __init__(self, base):
        self.base = base
        super().__init__(f"Invalid base {base!r}: only base 2 and base 4 are supported")


class InvalidDigitError(HLCDError):
    """A scalar digit is outside the legal range for its base."""

    def __init__(self, digit, base):
        self.digit = digit
        self.base = base
        super().__init__(
            f"Invalid digit {digit!r} for base {base}: expected 0..{base - 1}"
        )


class InvalidParametersError(HLCDError):
    """The code parameters (n, k, d) are not consistent."""

    def __init__(self, message, n=None, k=None, d=None, base=None):
        self.n = n
        self.k = k
        self.d = d
        self.base = base
        super().__init__(f"{message} (n={n}, k={k}, d={d}, base={base})")


class ComputationOverflowError(InvalidParametersError):
    """The length n does not fit in a packed 64-bit vector."""


class InvalidConfigurationError(HLCDError):
    """A search or export configuration value is out of range."""

    def __init__(self, field_name, value, reason):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid {field_name}={value!r}: {reason}")


class ParameterFileError(HLCDError):
    """A line of a parameter list file could not be parsed."""

    def __init__(self, path, line_number, line, reason):
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"{path}:{line_number}: {reason}: {line!r}")


class SearchExhausted(HLCDError):
    """
    No generator matrix satisfies the parameters under the active policy.

    This is a legitimate negative result, not a failure of the engine. It is
    only raised by ``find_code(..., strict=True)``; the default is to return
    ``None``.
    """

    def __init__(self, parameters, config):
        self.parameters = parameters
        self.config = config
        super().__init__(
            f"No matrix satisfies {parameters} under {config}"
        )
