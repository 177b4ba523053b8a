"""RFC 7807 Problem Details models."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

STANDARD_FIELDS = frozenset(["type", "title", "status", "detail", "instance"])


@dataclass
class ProblemDetail:
    """RFC 7807 Problem Details object.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str | None = None
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None

    # Extension members (additional fields from API)
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_payload(cls, payload: Any, content_type: str = "") -> "ProblemDetail | None":
        """Build problem details from an already parsed error body.

        Args:
            payload: Error body as classified by the client (mapping or text)
            content_type: Response content type

        Returns:
            ProblemDetail, or None if the payload is not RFC 7807 shaped
        """
        if not isinstance(payload, Mapping):
            return None
        # Without the problem+json media type, require at least one standard member
        if "application/problem+json" not in content_type and not STANDARD_FIELDS.intersection(payload):
            return None

        extensions = {k: v for k, v in payload.items() if k not in STANDARD_FIELDS}
        return cls(
            type=payload.get("type"),
            title=payload.get("title"),
            status=payload.get("status"),
            detail=payload.get("detail"),
            instance=payload.get("instance"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert problem details to exception message."""
        lines = []

        if self.title:
            lines.append(self.title)
        elif self.detail:
            lines.append(self.detail)

        if self.title and self.detail and self.title != self.detail:
            lines.append(self.detail)

        if self.type:
            lines.append(f"Problem Type: {self.type}")

        if self.instance:
            lines.append(f"Instance: {self.instance}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
