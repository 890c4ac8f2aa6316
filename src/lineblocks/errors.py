"""Exception classes for lineblocks.

Malformed markup never raises: every input renders to something. These
exceptions signal configuration mistakes or a collaborator breaking its
contract with the list scanner.
"""

from __future__ import annotations


class LineblocksError(Exception):
    """Base exception for all lineblocks errors."""

    pass


class ContractError(LineblocksError):
    """A collaborator broke its contract with the scanner.

    Raised for bugs outside the document being converted: a marker matcher
    that matches zero-length text, a document that reports an index as
    present but yields no line, or a splice over an empty range.
    """

    def __init__(
        self,
        collaborator: str,
        message: str,
        lineno: int | None = None,
    ) -> None:
        """Initialize contract error.

        Args:
            collaborator: Name of the offending collaborator (e.g., "bulleted")
            message: Description of the contract violation
            lineno: Line index involved (optional)
        """
        self.collaborator = collaborator
        self.lineno = lineno

        location = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"{collaborator}{location}: {message}")


class ConfigError(LineblocksError):
    """Invalid filter configuration.

    Raised for unknown flavor names or empty marker character sets.
    """

    pass
