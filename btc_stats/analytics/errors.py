"""
Analytics Errors
Typed failures raised by the normalization and statistics functions.

The analytics package never logs or swallows these. Callers decide
what a failure means for them (HTTP status, console message, ...).
"""


class StatisticsError(ValueError):
    """Base class for every analytics failure"""
    error_code = "statistics_error"


class EmptyDataset(StatisticsError):
    """compute() was given zero samples"""
    error_code = "empty_dataset"

    def __init__(self, message: str = "No price data available"):
        super().__init__(message)


class InsufficientSampleSize(StatisticsError):
    """A sample (n - 1) measure was requested with fewer than two samples"""
    error_code = "insufficient_sample_size"

    def __init__(self, count: int, required: int = 2):
        self.count = count
        self.required = required
        super().__init__(
            f"Sample measures need at least {required} samples, got {count}"
        )


class InvalidTarget(StatisticsError):
    """normalize() was given a target length below 1"""
    error_code = "invalid_target"

    def __init__(self, target):
        self.target = target
        super().__init__(f"Target length must be a positive integer, got {target!r}")


class DegenerateMean(StatisticsError):
    """Coefficient of variation is undefined because the mean is zero"""
    error_code = "degenerate_mean"

    def __init__(self, message: str = "Mean is zero, coefficient of variation is undefined"):
        super().__init__(message)
