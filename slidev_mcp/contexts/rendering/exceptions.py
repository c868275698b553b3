"""Tagged exceptions for the rendering pipeline."""

from pathlib import Path
from typing import Optional


class SlideRenderError(Exception):
    """
    Base class for failures while producing a deck.

    Every subclass carries a `kind` tag so callers can tell staging, renderer
    and collection failures apart without parsing messages.
    """

    kind = "render-failure"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestError(SlideRenderError):
    """Raised when an operation receives arguments outside the accepted set."""

    kind = "invalid-request"


class StagingError(SlideRenderError):
    """
    Raised when the execution directory or its input file cannot be created.

    Attributes:
        path: Directory or file that could not be created
    """

    kind = "staging-error"

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class RenderError(SlideRenderError):
    """
    Raised when the slidev subprocess cannot be spawned or exits non-zero.

    Attributes:
        returncode: Exit status (None when the process never ran or was killed)
        stdout: Captured standard output
        stderr: Captured standard error
    """

    kind = "render-error"

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

        parts = [message]
        tail = stderr.strip()[-500:]
        if tail:
            parts.append(tail)

        super().__init__("\n".join(parts))


class MissingOutputError(SlideRenderError):
    """
    Raised when the renderer reported success but its artifact is absent or empty.

    Attributes:
        expected: Path where the artifact was expected
    """

    kind = "missing-output-error"

    def __init__(self, message: str, expected: Optional[Path] = None):
        self.expected = expected
        super().__init__(message)
