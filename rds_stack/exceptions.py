"""
Exception hierarchy for the RDS stack program.

Raised while building the stack, before any resource is registered, so that
bad configuration fails the Pulumi preview instead of the AWS API.
"""

from typing import Any


class RdsStackError(Exception):
    """Base exception for all stack definition errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(RdsStackError):
    """Raised when a stack config value is invalid."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if key:
            details["key"] = key
        super().__init__(message, details)


class SubnetPlanError(RdsStackError):
    """Raised when the VPC block cannot hold the requested subnets."""
