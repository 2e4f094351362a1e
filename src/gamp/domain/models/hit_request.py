"""Hit request domain model."""

from dataclasses import dataclass, field

ParamValue = str | int | float | bool


@dataclass(frozen=True)
class HitRequest:
    """Protocol parameters for a single hit, before identity and session parameters are added.

    Optional entries set to None are absent and never transmitted. Any other
    value, including 0 and the empty string, is sent as-is.
    """

    required: dict[str, ParamValue]
    optional: dict[str, ParamValue | None] = field(default_factory=dict)

    def parameters(self) -> dict[str, ParamValue]:
        """Merge required and optional parameters, dropping absent values."""
        merged: dict[str, ParamValue | None] = {**self.required, **self.optional}
        return {key: value for key, value in merged.items() if value is not None}
