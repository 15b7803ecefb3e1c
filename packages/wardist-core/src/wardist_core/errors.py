"""Custom exception hierarchy for wardist-core.

This module defines the exception classes used throughout wardist:
- WardistError: Base exception for all wardist errors
- ConfigurationError: Raised when wardist.yaml cannot be loaded
- Declaration errors raised by the artifact registry
  (DuplicateChannelError, DuplicateModuleError, InvalidRoleError,
  UnknownModuleError, UnknownChannelError, ChannelStateError)
- PackagingError / MaterializeError: Raised by file-producing steps

User-facing messages are safe to display. Technical details are logged
internally via structlog and never exposed to the user.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class WardistError(Exception):
    """Base exception for wardist.

    All wardist exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed to the user.

    Example:
        >>> raise WardistError(
        ...     "Build configuration invalid",
        ...     internal_details="modules[1].name failed regex at wardist.yaml:12"
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize WardistError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "wardist_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ConfigurationError(WardistError):
    """Raised when build file parsing or validation fails.

    Attributes:
        file_path: Path to the build file (if known).
        field_path: Dot-separated path to the invalid field (e.g., "modules.0.name").

    Example:
        >>> raise ConfigurationError(
        ...     "Unknown convention 'webapp'",
        ...     file_path="wardist.yaml",
        ...     field_path="modules.0.conventions",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ConfigurationError with context.

        Args:
            user_message: Safe message to display to the user.
            file_path: Path to the build file (optional).
            field_path: Dot-separated path to the field (optional).
            internal_details: Technical details for internal logging only.
        """
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path


class DuplicateChannelError(WardistError):
    """Raised when a channel name is declared twice in one module scope.

    Attributes:
        module: Module path the channel was declared in.
        channel_name: The duplicated channel name.

    Example:
        >>> raise DuplicateChannelError(module=":date", channel_name="wars")
        # User sees: "Channel 'wars' already declared in module ':date'"
    """

    def __init__(
        self,
        module: str,
        channel_name: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(
            f"Channel '{channel_name}' already declared in module '{module}'",
            internal_details=internal_details,
        )
        self.module = module
        self.channel_name = channel_name


class DuplicateModuleError(WardistError):
    """Raised when a module path is registered twice."""

    def __init__(self, module: str, *, internal_details: str | None = None) -> None:
        super().__init__(
            f"Module '{module}' already registered",
            internal_details=internal_details,
        )
        self.module = module


class InvalidRoleError(WardistError):
    """Raised when an operation violates a channel's role flags.

    Use this exception when:
    - A channel is declared both resolvable and consumable (or neither)
    - publish() targets a channel that cannot be consumed
    - add_dependency() or resolve() targets a channel that cannot be resolved

    Attributes:
        channel: Channel path (e.g., ":date:wars"), if known.
        operation: The rejected operation.
    """

    def __init__(
        self,
        user_message: str,
        *,
        channel: str | None = None,
        operation: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.channel = channel
        self.operation = operation


class UnknownModuleError(WardistError):
    """Raised when a module reference does not exist.

    Always includes the list of registered modules for actionable feedback.

    Attributes:
        module: The requested module path.
        available_modules: Registered module paths.

    Example:
        >>> raise UnknownModuleError(module=":api", available_modules=[":", ":date"])
        # User sees: "Module ':api' not found. Available: :, :date"
    """

    def __init__(
        self,
        module: str,
        available_modules: list[str],
        *,
        internal_details: str | None = None,
    ) -> None:
        available_str = ", ".join(available_modules) if available_modules else "none"
        super().__init__(
            f"Module '{module}' not found. Available: {available_str}",
            internal_details=internal_details,
        )
        self.module = module
        self.available_modules = available_modules


class UnknownChannelError(WardistError):
    """Raised when a channel is not declared in the registry."""

    def __init__(
        self,
        module: str,
        channel_name: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(
            f"Channel '{channel_name}' not declared in module '{module}'",
            internal_details=internal_details,
        )
        self.module = module
        self.channel_name = channel_name


class UnknownDistributionError(WardistError):
    """Raised when a distribution name is not defined in the build file."""

    def __init__(
        self,
        name: str,
        available: list[str],
        *,
        internal_details: str | None = None,
    ) -> None:
        available_str = ", ".join(available) if available else "none"
        super().__init__(
            f"Distribution '{name}' not found. Available: {available_str}",
            internal_details=internal_details,
        )
        self.name = name
        self.available = available


class ChannelStateError(WardistError):
    """Raised when a channel transition is not allowed.

    A channel moves from DECLARED to PUBLISHED exactly once.
    """

    pass


class PackagingError(WardistError):
    """Raised when a module's web archive cannot be built.

    Example:
        >>> raise PackagingError(
        ...     "Web application directory missing for module ':date'",
        ...     internal_details="/work/date/src/main/webapp does not exist",
        ... )
    """

    pass


class MaterializeError(WardistError, OSError):
    """Raised when copying resolved artifacts to the destination fails.

    Also an OSError so callers handling I/O failures catch it. Files copied
    before the failure are left in place.

    Attributes:
        source: Artifact file being copied, if known.
        destination: Destination directory.
    """

    def __init__(
        self,
        user_message: str,
        *,
        source: str | None = None,
        destination: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.source = source
        self.destination = destination
