"""
Placeholder Substitution

Expands the fragment template language used by resume templates:

- ``{{path}}``: replaced by the value at a dotted path in the current scope
- ``{{#key}}BODY{{/key}}``: BODY rendered once per element of the list at ``key``
- ``{{.}}``: the current element inside a block

Unresolved placeholders are left in the output verbatim. Blocks do not nest:
matching is a single non-recursive pass, so an inner block inside a block body
is not expanded against the element. Literal ``{{`` cannot be escaped.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List

from folio.contexts.templating.variables import (
    MISSING,
    is_sequence,
    lookup_key,
    resolve,
    stringify,
)


@dataclass(frozen=True)
class PlaceholderPatterns:
    """
    Regex patterns for the fragment template language.

    The path of a placeholder is any run of characters other than '}'.
    A block closes on the same key it opened with; the body is matched lazily.
    """
    PLACEHOLDER: str = r"\{\{([^}]+)\}\}"
    BLOCK: str = r"\{\{#([^}]+)\}\}(.*?)\{\{/\1\}\}"
    CURRENT_ITEM: str = r"\{\{\.\}\}"
    CURRENT_ITEM_KEY: str = "."


PLACEHOLDER_RE = re.compile(PlaceholderPatterns.PLACEHOLDER)
BLOCK_RE = re.compile(PlaceholderPatterns.BLOCK, re.DOTALL)
CURRENT_ITEM_RE = re.compile(PlaceholderPatterns.CURRENT_ITEM)


def substitute(template: str, data: Any) -> str:
    """
    Replace every ``{{path}}`` token with its resolved value.

    Args:
        template: Fragment text containing placeholders
        data: Scope the paths are resolved against

    Returns:
        Text with resolved tokens replaced; unresolved tokens unchanged

    Example:
        >>> substitute("<h1>{{fullName}}</h1>{{missing}}", {"fullName": "Ada"})
        '<h1>Ada</h1>{{missing}}'
    """

    def replace(match: re.Match) -> str:
        value = resolve(data, match.group(1))
        if value is MISSING:
            return match.group(0)
        return stringify(value)

    return PLACEHOLDER_RE.sub(replace, template)


def _render_item(body: str, item: Any) -> str:
    """Render one block body for a single list element."""
    if not isinstance(item, Mapping) and not is_sequence(item):
        item_text = stringify(item)
        return CURRENT_ITEM_RE.sub(lambda _: item_text, body)

    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key == PlaceholderPatterns.CURRENT_ITEM_KEY:
            return stringify(item)
        # Single key lookup on the element, no dotted walk
        value = lookup_key(item, key)
        if value is MISSING:
            return match.group(0)
        return stringify(value)

    return PLACEHOLDER_RE.sub(replace, body)


def expand_blocks(template: str, data: Any) -> str:
    """
    Expand ``{{#key}}...{{/key}}`` blocks once per list element.

    A block whose key is absent or does not resolve to a list collapses to an
    empty string. Mismatched open/close markers are left as literal text.
    Element renderings are concatenated with no separator.

    Args:
        template: Fragment text containing blocks
        data: Scope the block keys are resolved against

    Returns:
        Text with every matched block expanded

    Example:
        >>> expand_blocks("<ul>{{#tags}}<li>{{.}}</li>{{/tags}}</ul>", {"tags": ["a", "b"]})
        '<ul><li>a</li><li>b</li></ul>'
    """

    def replace(match: re.Match) -> str:
        items = resolve(data, match.group(1))
        if not is_sequence(items):
            return ""
        body = match.group(2)
        return "".join(_render_item(body, item) for item in items)

    return BLOCK_RE.sub(replace, template)


def render_fragment(template: str, data: Any) -> str:
    """
    Fully render a fragment: scalar substitution, then block expansion.

    Scalar substitution runs over the whole fragment first, block bodies
    included, so a body token that resolves in the enclosing scope is filled
    from that scope before the block iterates.

    Args:
        template: Fragment text (None renders as an empty string)
        data: Scope for both passes

    Returns:
        Rendered fragment text
    """
    if not template:
        return ""
    return expand_blocks(substitute(template, data), data)


def find_unresolved_placeholders(text: str) -> List[str]:
    """
    List the distinct placeholder tokens still present in rendered output.

    Args:
        text: Rendered HTML

    Returns:
        Unique ``{{...}}`` tokens in order of first appearance
    """
    seen = []
    for match in PLACEHOLDER_RE.finditer(text):
        token = match.group(0)
        if token not in seen:
            seen.append(token)
    return seen
