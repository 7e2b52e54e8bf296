class SolverStatusError(Exception):
    """Raised when a solve call ends without a usable solution."""

    def __init__(self, message: str, status_name: str = "UNKNOWN"):
        super().__init__(message)
        self.status_name = status_name


class ModelInvalidError(SolverStatusError):
    """Raised when the model did not pass the solver's validation step."""

    pass


class InfeasibleModelError(SolverStatusError):
    """Raised when the model has been proven to have no satisfying assignment."""

    pass


class SolverTimeLimitError(SolverStatusError):
    """Raised when the time limit was reached before any solution was found."""

    pass


class UnknownSolverStatusError(SolverStatusError):
    """Raised when the solver terminated without a determined status."""

    pass


class SolutionNotAvailableError(Exception):
    """Raised when solution values are read from a result that holds no solution."""

    pass


class InvalidBoundPolicyError(Exception):
    """Raised when a bound policy breaks hard_min <= soft_min <= soft_max <= hard_max or has a negative penalty."""

    pass


class InputMismatchError(Exception):
    """Raised when the input tables are inconsistent with each other."""

    pass


class FileReadingError(Exception):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(Exception):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    ModelInvalidError: 400,
    InfeasibleModelError: 422,
    SolverTimeLimitError: 422,
    UnknownSolverStatusError: 422,
    SolutionNotAvailableError: 500,
    InvalidBoundPolicyError: 400,
    InputMismatchError: 400,
    FileReadingError: 500,
    FileContentError: 400,
}
