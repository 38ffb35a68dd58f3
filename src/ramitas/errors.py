"""Exception classes for Ramitas.

Provides standardized exceptions for error handling throughout Ramitas.
Rendering either returns a complete HTML string or raises one of these;
partial output is never returned.
"""

from __future__ import annotations

from typing import Any


def _format_path(path: tuple[int, ...]) -> str:
    return "root" + "".join(f"[{i}]" for i in path)


class RamitasError(Exception):
    """Base exception for all Ramitas errors.
    
    Subclass this for specific error categories.
    """

    pass


class MalformedNodeError(RamitasError):
    """A markup tree node has a shape that cannot be rendered.
    
    Raised when the first element of a tag-shaped sequence is not a
    scalar tag name, or when a tree holds a Node subclass of no known variant.
    """

    def __init__(
        self,
        message: str,
        node: Any = None,
        path: tuple[int, ...] = (),
    ) -> None:
        """Initialize malformed node error.
        
        Args:
            message: Error description
            node: The offending value
            path: Child indices leading from the root to the offending value
        """
        self.message = message
        self.node = node
        self.path = path
        super().__init__(f"{_format_path(path)}: {message}")


class DepthLimitError(RamitasError):
    """Markup tree nesting exceeded the configured maximum depth.
    
    Cyclic raw data (a list containing itself) surfaces as this error
    instead of exhausting the interpreter's recursion limit.
    """

    def __init__(self, max_depth: int, path: tuple[int, ...] = ()) -> None:
        """Initialize depth limit error.
        
        Args:
            max_depth: The limit that was exceeded
            path: Child indices leading to the node that crossed the limit
        """
        self.max_depth = max_depth
        self.path = path
        super().__init__(
            f"{_format_path(path[:8])}{'...' if len(path) > 8 else ''}: "
            f"markup tree deeper than max_depth={max_depth} (cyclic structure?)"
        )


__all__ = ["DepthLimitError", "MalformedNodeError", "RamitasError"]
