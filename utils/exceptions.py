class FitnessMetricsError(ValueError):
    """Base class for errors raised by a single metrics calculation."""


class InvalidMeasurement(FitnessMetricsError):
    """A physical quantity was non-positive, non-finite or not a number."""


class InvalidMetrics(FitnessMetricsError):
    """User metrics cannot be used for a BMR calculation."""


class UnknownExercise(FitnessMetricsError):
    """The exercise name is not present in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Exercise '{name}' is not in the catalog.")
