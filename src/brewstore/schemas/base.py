"""Base class for data-transfer objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TransferModel(BaseModel):
    """Immutable projection handed across the service boundary.

    Every field is optional; ``None`` means the caller did not supply it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def supplied_fields(self, *, exclude: frozenset[str] = frozenset()) -> dict[str, object]:
        """Return the fields carrying a value, skipping ``None`` and blank strings."""

        supplied: dict[str, object] = {}
        for name, value in self.model_dump(exclude=set(exclude)).items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            supplied[name] = value
        return supplied
