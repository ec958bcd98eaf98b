"""Schemas for tokenized input and validation findings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TaggedToken(BaseModel):
    """A token produced by an external tokenizer/tagger.

    Args:
        surface: Token text as it appears in the sentence.
        tags: Part-of-speech tags, most general first.
        offset: Character offset of the token within the sentence.
    """

    model_config = ConfigDict(frozen=True)

    surface: str
    tags: list[str] = Field(..., min_length=1)
    offset: int = Field(default=0, ge=0)

    @property
    def primary_tag(self) -> str:
        return self.tags[0]


class Sentence(BaseModel):
    """A sentence and its tokens, read-only input to validators."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    tokens: list[TaggedToken] = Field(default_factory=list)
    line_number: int = Field(default=1, ge=1)


class Finding(BaseModel):
    """One problem reported by a validator for a sentence.

    Rendering into a localized message is left to the reporting layer;
    :attr:`message` is a plain English fallback.
    """

    model_config = ConfigDict(frozen=True)

    validator: str
    surface: str
    count: int
    sentence: Sentence

    @property
    def message(self) -> str:
        return (
            f"Found {self.count} occurrences of particle '{self.surface}' "
            f"in one sentence (line {self.sentence.line_number})."
        )
