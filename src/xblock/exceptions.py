from __future__ import annotations

from typing import Any, Dict, Mapping


class XBlockError(Exception):
    """Base exception for the xblock merge engine."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class DuplicateUsageError(XBlockError):
    """Raised when a block fragment is imported a second time in one session."""

    def __init__(
        self,
        message: str = "",
        *,
        block_path: str,
        current: Any,
        original: Any,
        usages: list[Any],
    ) -> None:
        super().__init__(
            message,
            context={
                "block_path": block_path,
                "current": {"used_by": current.used_by, "alias": current.alias},
                "original": {"used_by": original.used_by, "alias": original.alias},
                "usages": [
                    {"path": path, "used_by": u.used_by, "alias": u.alias}
                    for path, u in usages
                ],
            },
        )
        self.block_path = block_path
        self.current = current
        self.original = original
        self.usages = usages


class BlockReadError(XBlockError, OSError):
    """Raised when a block fragment cannot be read."""

    def __init__(self, message: str = "", *, block_path: str, resolved_path: str) -> None:
        XBlockError.__init__(
            self,
            message,
            context={"block_path": block_path, "resolved_path": resolved_path},
        )
        OSError.__init__(self, message)
        self.block_path = block_path
        self.resolved_path = resolved_path


class VariableConflictError(XBlockError):
    """Raised when a host document and a block declare the same names."""

    def __init__(
        self,
        message: str = "",
        *,
        document_id: str,
        block_path: str,
        conflicts: list[str],
    ) -> None:
        super().__init__(
            message,
            context={
                "document_id": document_id,
                "block_path": block_path,
                "conflicts": list(conflicts),
            },
        )
        self.document_id = document_id
        self.block_path = block_path
        self.conflicts = list(conflicts)


class ConfigValidationError(XBlockError, ValueError):
    """Raised when the merged configuration fails schema validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        XBlockError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "XBlockError",
    "DuplicateUsageError",
    "BlockReadError",
    "VariableConflictError",
    "ConfigValidationError",
]
