"""
Configuration loading exceptions.

Both load failures are recoverable: the loader logs them, finishes the merge
and raises the first one with the merged record attached, so callers can
decide whether a broken file or a bad environment variable is fatal.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .base import ExceptionContext, VolConfigError

if TYPE_CHECKING:
    from ..core.config.models import VolumeConfig


class ConfigurationError(VolConfigError):
    """Base class for configuration-related errors."""
    pass


class ConfigLoadError(ConfigurationError):
    """A step of the file + environment merge failed.

    ``config`` holds the record as far as it could be built, and is always
    set by the time the loader raises. ``related_errors`` collects failures
    of later steps of the same load.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[ExceptionContext] = None,
    ):
        super().__init__(message, context)
        self.path = path
        self.config: Optional["VolumeConfig"] = None
        self.related_errors: List["ConfigLoadError"] = []

    @property
    def all_errors(self) -> List["ConfigLoadError"]:
        return [self, *self.related_errors]

    def __str__(self) -> str:
        result = super().__str__()
        for related in self.related_errors:
            result += f"\n\nAlso failed: {related.message}"
        return result

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        data["related_errors"] = [e.to_dict() for e in self.related_errors]
        return data


class ConfigDecodeError(ConfigLoadError):
    """Raised when the configuration file is missing, unreadable or invalid."""

    def __init__(
        self,
        path: str,
        problems: List[str],
        technical_details: Optional[str] = None,
    ):
        self.problems = problems
        message = f"Failed to parse config file {path}:"
        for problem in problems:
            message += f"\n  - {problem}"
        context = ExceptionContext(
            help_text="Check that the file exists and that every value has the type its key expects",
            error_code="CONFIG_DECODE",
            context={"path": path},
            technical_details=technical_details,
        )
        super().__init__(message, path, context)


class ConfigOverlayError(ConfigLoadError):
    """Raised when an environment variable cannot be converted to its field type."""

    def __init__(self, errors: Dict[str, str], path: Optional[str] = None):
        self.variables = list(errors)
        message = "Failed to gather environment config variables:"
        for name, error in errors.items():
            message += f"\n  - {name}: {error}"
        context = ExceptionContext(
            help_text="Unset the listed variables or give them a value of the expected type",
            error_code="CONFIG_OVERLAY",
            context={"variables": ", ".join(self.variables)},
        )
        super().__init__(message, path, context)
