"""
Blocks component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from themekit.core.entities import PageContext


@dataclass(frozen=True)
class Block:
    """
    A parsed block.

    Freeform HTML between delimited blocks has block_name None.
    inner_content interleaves HTML chunks with None placeholders, one per
    entry in inner_blocks, in document order.
    """

    block_name: str | None
    attrs: dict[str, Any] = field(default_factory=dict)
    inner_blocks: tuple[Block, ...] = ()
    inner_html: str = ""
    inner_content: tuple[str | None, ...] = ()

    @property
    def is_freeform(self) -> bool:
        return self.block_name is None


@dataclass(frozen=True)
class BlockInstancesInput:
    """
    Input for extracting the first instances of a block type.

    content falls back to the current post's content when empty.
    """

    block_name: str
    content: str | None = None
    instances: int = 1
    context: PageContext | None = None


@dataclass(frozen=True)
class BlockInstancesOutput:
    """
    Rendered HTML of the matched blocks.

    found is False and html is "" when nothing matched.
    """

    found: bool
    html: str = ""
    count: int = 0
    warnings: list[str] = field(default_factory=list)
    success: bool = True
