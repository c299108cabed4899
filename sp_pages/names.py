"""Display-name references resolved at serialization time."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class LiteralName(BaseModel):
    """Display text used verbatim."""

    kind: Literal["literal"] = "literal"
    text: str

    model_config = ConfigDict(frozen=True)


class LocalizationKey(BaseModel):
    """Dotted path looked up in a locale catalog when the page is rendered."""

    kind: Literal["key"] = "key"
    path: str = Field(..., min_length=1)
    default: Optional[str] = Field(
        default=None,
        description="Text used when the catalog has no entry for the path",
    )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.path


NameRef = Annotated[Union[LiteralName, LocalizationKey], Field(discriminator="kind")]
