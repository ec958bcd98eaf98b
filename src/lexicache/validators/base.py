"""Validator interface and rule attribute access.

The surrounding framework decides which validators run for a document and
supplies their configured attributes; validators only answer
:meth:`Validator.supported_languages` and :meth:`Validator.validate`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from lexicache.models import Finding, Sentence


class RuleAttributes(BaseModel):
    """Raw attribute values configured for one validator.

    Set-valued attributes may be given as a comma-separated string, or as
    a list/set of strings.
    """

    model_config = ConfigDict(frozen=True)

    values: dict[str, Any] = Field(default_factory=dict)

    def get_str(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.values.get(name)
        if value is None:
            return default
        return str(value)

    def get_set(self, name: str) -> frozenset[str]:
        value = self.values.get(name)
        if value is None:
            return frozenset()
        if isinstance(value, str):
            items = value.split(",")
        elif isinstance(value, (list, tuple, set, frozenset)):
            items = [str(item) for item in value]
        else:
            raise ValueError(
                f"Attribute '{name}' must be a string or a collection, "
                f"got {type(value).__name__}"
            )
        return frozenset(item.strip() for item in items if item.strip())


class Validator(ABC):
    """Base class for sentence-level validators."""

    name: str = "Validator"

    @abstractmethod
    def supported_languages(self) -> set[str]:
        """Return the ISO 639-1 codes this validator applies to.

        An empty set means every language.
        """
        ...

    @abstractmethod
    def validate(
        self,
        sentence: Sentence,
        attributes: Optional[RuleAttributes] = None,
    ) -> list[Finding]:
        """Check one sentence and return the findings, possibly empty."""
        ...
