"""Flattening of nested lists into document order."""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import UnbalancedListError
from .models import ListDescriptor, Token
from .text import indent_for

LIST_OPEN_TYPES = frozenset({"bullet_list_open", "ordered_list_open"})
LIST_CLOSE_TYPES = frozenset({"bullet_list_close", "ordered_list_close"})
LIST_ITEM_OPEN_TYPE = "list_item_open"

# Stand-in for "no mapped token seen yet"
_INITIAL_MAP = (0, 1)


def _open_list(
    token: Token, parent: ListDescriptor | None, depth: int, insertion_index: int
) -> ListDescriptor:
    is_unordered = token.type == "bullet_list_open"
    return ListDescriptor(
        is_unordered=is_unordered,
        all_ancestors_unordered=is_unordered
        and (parent is None or parent.all_ancestors_unordered),
        open_token=token,
        indent=indent_for(token),
        parent_indent=parent.indent if parent is not None else 0,
        nesting_depth=depth,
        insertion_index=insertion_index,
    )


def flatten_lists(tokens: Sequence[Token]) -> tuple[ListDescriptor, ...]:
    """Flatten the nested lists of a token stream.

    Lists close in LIFO order, so each list reserves its slot in the output
    when it opens and is spliced into that slot when it closes. Nested lists
    opened later reserve later (or equal) slots and are inserted first, which
    leaves every list after its ancestors and before its later siblings. An
    explicit stack replaces recursion, so nesting depth is only bounded by
    memory.

    The end line of a list is taken from the last token carrying a line map
    before the close token; list and item open tokens do not count.

    Args:
        tokens: Block-level parser tokens.

    Returns:
        tuple[ListDescriptor, ...]: Lists in document order.

    Raises:
        UnbalancedListError: If a close or item token appears outside a list, or
            the stream ends with lists still open.

    Examples:
        lists = flatten_lists(document.tokens)
        [descriptor.nesting_depth for descriptor in lists]  # [0, 1, 0]
    """
    flattened: list[ListDescriptor] = []
    stack: list[ListDescriptor] = []
    last_map = _INITIAL_MAP

    for position, token in enumerate(tokens):
        if token.type in LIST_OPEN_TYPES:
            parent = stack[-1] if stack else None
            stack.append(_open_list(token, parent, len(stack), len(flattened)))
        elif token.type in LIST_CLOSE_TYPES:
            if not stack:
                raise UnbalancedListError(token.type, position)
            current = stack.pop()
            current.last_line_index = last_map[1]
            flattened.insert(current.insertion_index, current)
        elif token.type == LIST_ITEM_OPEN_TYPE:
            if not stack:
                raise UnbalancedListError(token.type, position)
            stack[-1].items.append(token)
        elif token.map is not None:
            last_map = token.map

    if stack:
        raise UnbalancedListError(stack[-1].open_token.type)

    # Reserved slots shift once ancestors are inserted ahead of their children
    for insertion_index, descriptor in enumerate(flattened):
        descriptor.insertion_index = insertion_index

    return tuple(flattened)
