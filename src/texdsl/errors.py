"""Exception classes for texdsl.

Construction misuse surfaces as BuildError subclasses raised from the
offending builder call. Rendering itself has no error paths; failures
raised by an output sink propagate to the caller unchanged.
"""

from __future__ import annotations


class TexDslError(Exception):
    """Base exception for all texdsl errors.
    
    Subclass this for specific error categories.
    """

    pass


class BuildError(TexDslError):
    """Error while constructing a document tree."""

    pass


class AttachmentError(BuildError):
    """Element attached where it cannot belong.

    Raised when an element that already has a parent is attached again,
    or when a container would become its own descendant.
    """

    def __init__(self, element_name: str, message: str) -> None:
        """Initialize attachment error.

        Args:
            element_name: Name of the element being attached
            message: Description of the violation
        """
        self.element_name = element_name
        super().__init__(f"Cannot attach '{element_name}': {message}")


class ScopeError(BuildError):
    """Builder call made on a container outside the current init routine.

    While a child's init routine runs, its enclosing containers are locked.
    Adding to any of them from inside that routine raises this error.
    """

    def __init__(self, container_name: str, active_name: str) -> None:
        """Initialize scope error.

        Args:
            container_name: Name of the locked container that was addressed
            active_name: Name of the child currently being initialized
        """
        self.container_name = container_name
        self.active_name = active_name
        super().__init__(
            f"Cannot add to '{container_name}' while '{active_name}' is being built; "
            f"use the element passed to the init routine instead"
        )


class ConfigError(TexDslError):
    """Invalid render configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: RenderConfig field that failed validation
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid {field}: {message}")
