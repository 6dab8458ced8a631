"""Exit codes of the spec commands and the exceptions they map from.

    0  success
    1  a spec reference did not resolve
    2  rejected input, self reference, sequence conflicts, failed validation
    3  cancelled
    4  a spec document could not be read, parsed or written
    5  anything else
"""

from specgraph.cli._commands._shared import ExitCode

EXIT_SUCCESS: int = ExitCode.SUCCESS
EXIT_NOT_FOUND: int = ExitCode.NOT_FOUND
EXIT_VALIDATION_ERROR: int = ExitCode.VALIDATION_ERROR
EXIT_CANCELLED: int = ExitCode.CANCELLED
EXIT_IO_ERROR: int = ExitCode.IO_ERROR
EXIT_INTERNAL_ERROR: int = ExitCode.INTERNAL_ERROR


def exit_code_for_exception(exc: BaseException) -> int:
    """Pick the exit code for an exception raised by a spec operation."""
    from specgraph.exceptions import (
        SpecIOError,
        SpecNotFoundError,
        SpecParseError,
        SpecValidationError,
    )

    match exc:
        # Before ValueError/KeyError: these are also builtin lookup errors.
        case SpecNotFoundError():
            return EXIT_NOT_FOUND
        case SpecValidationError() | ValueError():
            return EXIT_VALIDATION_ERROR
        case KeyboardInterrupt():
            return EXIT_CANCELLED
        case SpecIOError() | SpecParseError() | OSError():
            return EXIT_IO_ERROR
        case _:
            return EXIT_INTERNAL_ERROR
