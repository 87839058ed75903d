"""
Block parser, renderer and serializer.

Blocks are delimited inside an HTML document by comments:

    <!-- wp:namespace/name {"json": "attrs"} -->inner html<!-- /wp:namespace/name -->
    <!-- wp:name {"json": "attrs"} /-->

A name without a namespace belongs to `core/`. HTML outside any block is
kept as freeform blocks (block_name None) so that rendering every block
in order reproduces the document.

Key behaviors:
- Invalid attribute JSON is logged and treated as {}
- A closer with no open block turns the rest of the document into freeform
- Blocks still open at end of document are closed there
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .models import Block

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "core/"

TOKEN_PATTERN = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)"
    r"\s+(?P<attrs>\{.*?\}\s+)?(?P<void>/)?-->",
    re.DOTALL,
)

# Dynamic block callback: (attrs, rendered inner content, block) -> html
RenderCallback = Callable[[dict[str, Any], str, Block], str]


@dataclass
class _Frame:
    """An open block while its closer is being searched for."""

    name: str
    attrs: dict[str, Any]
    token_start: int
    prev_offset: int
    leading_html_start: int | None
    inner_blocks: list[Block] = field(default_factory=list)
    inner_html: list[str] = field(default_factory=list)
    inner_content: list[str | None] = field(default_factory=list)

    def add_html(self, html: str) -> None:
        if html:
            self.inner_html.append(html)
            self.inner_content.append(html)

    def add_block(self, block: Block, html_before: str, end_offset: int) -> None:
        self.add_html(html_before)
        self.inner_blocks.append(block)
        self.inner_content.append(None)
        self.prev_offset = end_offset

    def freeze(self) -> Block:
        return Block(
            block_name=self.name,
            attrs=self.attrs,
            inner_blocks=tuple(self.inner_blocks),
            inner_html="".join(self.inner_html),
            inner_content=tuple(self.inner_content),
        )


def freeform_block(html: str) -> Block:
    """Wrap loose HTML in a nameless block."""
    return Block(block_name=None, inner_html=html, inner_content=(html,))


def _parse_attrs(raw: str | None, block_name: str) -> dict[str, Any]:
    if raw is None:
        return {}
    try:
        attrs = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Invalid attributes on block '%s': %s", block_name, e)
        return {}
    if not isinstance(attrs, dict):
        logger.warning("Attributes on block '%s' are not an object", block_name)
        return {}
    return attrs


def parse_blocks(document: str) -> list[Block]:
    """
    Parse a document into its top-level blocks.

    Args:
        document: HTML with block delimiter comments.

    Returns:
        Top-level blocks in document order, freeform HTML included.
    """
    output: list[Block] = []
    stack: list[_Frame] = []
    offset = 0

    def add_freeform(html: str) -> None:
        if html:
            output.append(freeform_block(html))

    def close_top_level(frame: _Frame, block: Block) -> None:
        if frame.leading_html_start is not None:
            add_freeform(document[frame.leading_html_start : frame.token_start])
        output.append(block)

    for match in TOKEN_PATTERN.finditer(document):
        start, end = match.span()
        block_name = (match.group("namespace") or DEFAULT_NAMESPACE) + match.group("name")

        if match.group("closer"):
            if not stack:
                logger.debug("Stray closer for '%s' at offset %d", block_name, start)
                add_freeform(document[offset:])
                return output

            frame = stack.pop()
            frame.add_html(document[frame.prev_offset : start])
            block = frame.freeze()
            if stack:
                parent = stack[-1]
                parent.add_block(block, document[parent.prev_offset : frame.token_start], end)
            else:
                close_top_level(frame, block)
            offset = end
            continue

        attrs = _parse_attrs(match.group("attrs"), block_name)

        if match.group("void"):
            block = Block(block_name=block_name, attrs=attrs)
            if stack:
                parent = stack[-1]
                parent.add_block(block, document[parent.prev_offset : start], end)
            else:
                add_freeform(document[offset:start])
                output.append(block)
            offset = end
            continue

        stack.append(
            _Frame(
                name=block_name,
                attrs=attrs,
                token_start=start,
                prev_offset=end,
                leading_html_start=offset if start > offset else None,
            )
        )
        offset = end

    if not stack:
        add_freeform(document[offset:])
        return output

    # Unclosed blocks end with the document
    while stack:
        frame = stack.pop()
        frame.add_html(document[frame.prev_offset :])
        block = frame.freeze()
        if stack:
            parent = stack[-1]
            parent.add_block(block, document[parent.prev_offset : frame.token_start], len(document))
        else:
            close_top_level(frame, block)

    return output


def render_block(
    block: Block,
    callbacks: dict[str, RenderCallback] | None = None,
) -> str:
    """
    Render a block to HTML.

    Inner blocks are rendered into their placeholders. A block with a
    registered callback is rendered by that callback.
    """
    parts: list[str] = []
    index = 0
    for chunk in block.inner_content:
        if chunk is None:
            parts.append(render_block(block.inner_blocks[index], callbacks))
            index += 1
        else:
            parts.append(chunk)
    content = "".join(parts)

    if callbacks and block.block_name in callbacks:
        return callbacks[block.block_name](block.attrs, content, block)
    return content


def render_blocks(blocks: list[Block], callbacks: dict[str, RenderCallback] | None = None) -> str:
    return "".join(render_block(block, callbacks) for block in blocks)


def serialize_attrs(attrs: dict[str, Any]) -> str:
    """JSON-encode attributes so they cannot terminate the comment."""
    encoded = json.dumps(attrs, separators=(",", ":"), ensure_ascii=False)
    return (
        encoded.replace("--", "\\u002d\\u002d")
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace('\\"', "\\u0022")
    )


def serialize_block(block: Block) -> str:
    """Turn a block back into delimited markup."""
    if block.block_name is None:
        return block.inner_html

    name = block.block_name
    if name.startswith(DEFAULT_NAMESPACE):
        name = name[len(DEFAULT_NAMESPACE) :]
    opener = f"<!-- wp:{name} "
    if block.attrs:
        opener += serialize_attrs(block.attrs) + " "

    if not block.inner_content:
        return opener + "/-->"

    parts: list[str] = []
    index = 0
    for chunk in block.inner_content:
        if chunk is None:
            parts.append(serialize_block(block.inner_blocks[index]))
            index += 1
        else:
            parts.append(chunk)
    return f"{opener}-->{''.join(parts)}<!-- /wp:{name} -->"


def serialize_blocks(blocks: list[Block]) -> str:
    return "".join(serialize_block(block) for block in blocks)
