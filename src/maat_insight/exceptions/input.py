"""Input-related exceptions: log files, encodings, malformed entries, unknown names.

Everything here is caller-facing and user-correctable. The command line
reports these on stderr and exits with status 1.
"""

from pathlib import Path
from typing import Iterable, Optional

from .base import MaatInsightError


class InvalidInputError(MaatInsightError):
    """Base class for errors caused by the input the caller supplied."""

    pass


class LogFileNotFoundError(InvalidInputError):
    """Raised when the log file does not exist."""

    def __init__(self, filepath: Path):
        super().__init__(f"Log file not found: {filepath}", details={"filepath": str(filepath)})
        self.filepath = filepath


class LogEncodingError(InvalidInputError):
    """Raised when the log file cannot be decoded with the configured encoding."""

    def __init__(self, filepath: Path, encoding: str, reason: str):
        super().__init__(
            f"Cannot decode log file {filepath} as {encoding}. Try specifying --input-encoding",
            details={"filepath": str(filepath), "encoding": encoding, "reason": reason},
        )
        self.filepath = filepath
        self.encoding = encoding
        self.reason = reason


class MalformedLogError(InvalidInputError):
    """Raised when a log is structurally broken as a whole (e.g. invalid XML)."""

    def __init__(self, vcs: str, reason: str):
        super().__init__(
            f"{vcs}: Failed to parse the given file - is it a valid logfile?",
            details={"vcs": vcs, "reason": reason},
        )
        self.vcs = vcs
        self.reason = reason


class MalformedLogLineError(InvalidInputError):
    """Raised when a structurally required line cannot be parsed."""

    def __init__(self, vcs: str, reason: str, line: str = "", line_number: Optional[int] = None):
        details = {"vcs": vcs, "reason": reason}
        if line_number is not None:
            details["line"] = str(line_number)
        super().__init__(f"{vcs}: {reason}", details=details)
        self.vcs = vcs
        self.reason = reason
        self.line = line
        self.line_number = line_number


class UnknownVcsError(InvalidInputError):
    """Raised when the requested version-control system has no parser."""

    def __init__(self, vcs: str, supported: Iterable[str]):
        supported = sorted(supported)
        super().__init__(
            f"Invalid VCS: {vcs}",
            details={"supported": ", ".join(supported)},
        )
        self.vcs = vcs
        self.supported = supported


class UnknownAnalysisError(InvalidInputError):
    """Raised when the requested analysis is not registered."""

    def __init__(self, analysis: str, supported: Iterable[str]):
        supported = sorted(supported)
        super().__init__(
            f"Invalid analysis: {analysis}",
            details={"supported": ", ".join(supported)},
        )
        self.analysis = analysis
        self.supported = supported
