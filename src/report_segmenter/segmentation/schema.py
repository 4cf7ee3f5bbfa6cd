"""Pydantic models for segmented report content.

A parsed report is an ordered tuple of blocks, each either a run of narrative
text or a structured GFM table.  The ``kind`` field discriminates the two so
that the JSON export in formatting.py can be validated back into blocks.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TextBlock(BaseModel):
    """A run of consecutive non-table lines, newlines and blank lines preserved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    content: str


class TableBlock(BaseModel):
    """A GFM table split into header cells and body rows.

    Cells keep their source column order and are stored as tuples so that a
    cached parse result can be shared between callers.  Body rows are NOT
    reconciled against the header width: an LLM that emits a short or long
    row gets exactly that row back, and the renderer decides how to show it.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["table"] = "table"
    headers: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def is_empty(self) -> bool:
        """True for the degraded table produced from fewer than two lines."""
        return not self.headers and not self.rows


Block = Annotated[Union[TextBlock, TableBlock], Field(discriminator="kind")]

# Validates plain dicts (e.g. loaded from JSON) back into TextBlock / TableBlock
BLOCK_LIST_ADAPTER: TypeAdapter[list[Block]] = TypeAdapter(list[Block])
