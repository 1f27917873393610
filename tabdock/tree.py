"""Binary tree arranging the nodes of one dock surface.

Nodes live in a flat list laid out like a binary heap: the root is at index 0
and the children of node ``n`` are at ``2n + 1`` (left/top) and ``2n + 2``
(right/bottom).
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .geometry import Rect
from .indices import NodeIndex, TabIndex
from .node import Node
from .placement import Split

Tab = TypeVar("Tab")


def _slot(index: NodeIndex | int) -> int:
    position = operator.index(index)
    if position < 0:
        raise IndexError(f"node index {position} is negative")
    return position


class Tree(Generic[Tab]):
    """A binary tree of :class:`Node` objects holding tabs and splits."""

    def __init__(self, tabs: Iterable[Tab]) -> None:
        self._nodes: list[Node] = [Node.leaf_with(tabs)]
        self._focused_node: NodeIndex | None = None

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self._nodes)}, focused={self._focused_node!r})"

    def __len__(self) -> int:
        """Return the number of node slots, empty ones included."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        """Iterate over all node slots, empty ones included."""
        return iter(self._nodes)

    def __getitem__(self, index: NodeIndex | int) -> Node:
        return self._nodes[_slot(index)]

    def __setitem__(self, index: NodeIndex | int, node: Node) -> None:
        self._nodes[_slot(index)] = node

    def is_empty(self) -> bool:
        """Return True if the tree holds no node slots at all."""
        return not self._nodes

    def find_active(self) -> tuple[Rect, Tab] | None:
        """Return the viewport and active tab of the first leaf, if any."""
        for node in self._nodes:
            if node.is_leaf() and node.tabs is not None and node.active is not None:
                position = node.active.index
                if 0 <= position < len(node.tabs):
                    return node.viewport, node.tabs[position]
                return None
        return None

    def tabs(self) -> Iterator[Tab]:
        """Iterate over every tab in the tree, leaf by leaf."""
        for node in self._nodes:
            if node.is_leaf() and node.tabs is not None:
                yield from node.tabs

    def num_tabs(self) -> int:
        """Return the number of tabs in the whole tree."""
        return sum(node.tabs_count() for node in self._nodes)

    def root_node(self) -> Node | None:
        """Return the root node, or None if the tree is empty."""
        return self._nodes[0] if self._nodes else None

    def split_tabs(
        self, parent: NodeIndex, split: Split, fraction: float, tabs: Iterable[Tab]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` in direction ``split``, putting ``tabs`` in the new node."""
        return self.split(parent, split, fraction, Node.leaf_with(tabs))

    def split_above(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Tab]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent``, placing a new node holding ``tabs`` above the old one."""
        return self.split(parent, Split.ABOVE, fraction, Node.leaf_with(tabs))

    def split_below(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Tab]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent``, placing a new node holding ``tabs`` below the old one."""
        return self.split(parent, Split.BELOW, fraction, Node.leaf_with(tabs))

    def split_left(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Tab]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent``, placing a new node holding ``tabs`` left of the old one."""
        return self.split(parent, Split.LEFT, fraction, Node.leaf_with(tabs))

    def split_right(
        self, parent: NodeIndex, fraction: float, tabs: Iterable[Tab]
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent``, placing a new node holding ``tabs`` right of the old one."""
        return self.split(parent, Split.RIGHT, fraction, Node.leaf_with(tabs))

    def split(
        self, parent: NodeIndex, split: Split, fraction: float, new: Node
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split ``parent`` into two children: its old content and ``new``.

        ``fraction`` (0..=1) is the share of the area the old node keeps. Returns
        the indices of the old node and the new node, and focuses the new one.

        Raises ValueError if ``fraction`` is out of range, if ``parent`` is an
        empty node, or if ``new`` is not a leaf holding at least one tab.
        """
        target = self[parent]
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"fraction must be within 0..=1, got {fraction}")
        if target.is_empty():
            raise ValueError("cannot split an empty node")
        if new.tabs_count() == 0:
            raise ValueError("the new node must be a leaf holding at least one tab")
        old = target.split(split, fraction)

        last_used = max(
            (i for i, node in enumerate(self._nodes) if not node.is_empty()), default=0
        )
        size = (1 << (NodeIndex(last_used).level() + 1)) - 1
        if len(self._nodes) > size:
            del self._nodes[size:]
        else:
            self._nodes.extend(Node.empty() for _ in range(size - len(self._nodes)))

        if split in (Split.LEFT, Split.ABOVE):
            old_index, new_index = parent.right(), parent.left()
        else:
            old_index, new_index = parent.left(), parent.right()

        if old.is_parent():
            levels_to_move = NodeIndex(len(self._nodes)).level() - old_index.level()
            for level in reversed(range(1, levels_to_move)):
                old_start = parent.children_at(level).start
                new_start = old_index.children_at(level).start
                count = 1 << level
                moving = self._nodes[old_start : old_start + count]
                vacant = self._nodes[new_start : new_start + count]
                self._nodes[old_start : old_start + count] = vacant
                self._nodes[new_start : new_start + count] = moving

        self[old_index] = old
        self[new_index] = new
        self._focused_node = new_index
        return old_index, new_index

    def _node_at(self, index: NodeIndex) -> Node | None:
        return self._nodes[index.index] if index.index < len(self._nodes) else None

    def _first_leaf(self, top: NodeIndex) -> NodeIndex | None:
        left, right = top.left(), top.right()
        left_node, right_node = self._node_at(left), self._node_at(right)
        if left_node is not None and left_node.is_leaf():
            return left
        if right_node is not None and right_node.is_leaf():
            return right
        left_parent = left_node is not None and left_node.is_parent()
        right_parent = right_node is not None and right_node.is_parent()
        if left_parent:
            found = self._first_leaf(left)
            if found is not None or not right_parent:
                return found
        if right_parent:
            return self._first_leaf(right)
        return None

    def find_active_focused(self) -> tuple[Rect, Tab] | None:
        """Return the viewport and active tab of the focused leaf, if any."""
        if self._focused_node is None:
            return None
        node = self._node_at(self._focused_node)
        if node is None or not node.is_leaf() or node.tabs is None or node.active is None:
            return None
        position = node.active.index
        if 0 <= position < len(node.tabs):
            return node.viewport, node.tabs[position]
        return None

    def focused_leaf(self) -> NodeIndex | None:
        """Return the index of the focused leaf, or None."""
        return self._focused_node

    def set_focused_node(self, node_index: NodeIndex) -> None:
        """Focus ``node_index`` if it is a leaf; otherwise clear the focus."""
        node = self._node_at(node_index) if node_index.index >= 0 else None
        self._focused_node = node_index if node is not None and node.is_leaf() else None

    def remove_leaf(self, node: NodeIndex) -> None:
        """Remove the leaf at ``node``, letting its sibling take the parent's place.

        Raises ValueError if the node is not a leaf.
        """
        if not self[node].is_leaf():
            raise ValueError("only leaf nodes can be removed")

        parent = node.parent()
        if parent is None:
            self._nodes.clear()
            return

        if node == self._focused_node:
            self._focused_node = None
            current = node
            while (up := current.parent()) is not None:
                sibling = up.right() if current.is_left() else up.left()
                sibling_node = self._node_at(sibling)
                if sibling_node is not None and sibling_node.is_leaf():
                    self._focused_node = sibling
                    break
                found = self._first_leaf(sibling)
                if found is not None:
                    self._focused_node = found
                    break
                current = up

        self[parent] = Node.empty()
        self[node] = Node.empty()

        sibling_range = parent.children_right if node.is_left() else parent.children_left
        level = 0
        while True:
            for dst, src in zip(parent.children_at(level), sibling_range(level + 1)):
                if src >= len(self._nodes):
                    return
                if self._focused_node == NodeIndex(src):
                    self._focused_node = NodeIndex(dst)
                self._nodes[dst] = self._nodes[src]
                self._nodes[src] = Node.empty()
            level += 1

    def push_to_first_leaf(self, tab: Tab) -> None:
        """Add ``tab`` to the first leaf, or fill the first empty slot with it."""
        for position, node in enumerate(self._nodes):
            if node.is_leaf():
                node.append_tab(tab)
                self._focused_node = NodeIndex(position)
                return
            if node.is_empty():
                self._nodes[position] = Node.leaf(tab)
                self._focused_node = NodeIndex(position)
                return
        if self._nodes:
            raise RuntimeError("tree has neither a leaf nor an empty slot")
        self._nodes.append(Node.leaf(tab))
        self._focused_node = NodeIndex(0)

    def set_active_tab(self, node_index: NodeIndex, tab_index: TabIndex | int) -> None:
        """Make ``tab_index`` the active tab of the leaf at ``node_index``."""
        node = self._node_at(node_index) if node_index.index >= 0 else None
        if node is not None and node.is_leaf():
            node.active = TabIndex(operator.index(tab_index))

    def push_to_focused_leaf(self, tab: Tab) -> None:
        """Add ``tab`` to the focused leaf, falling back to the first leaf.

        A new leaf is created when the tree is empty.
        """
        if not self._nodes:
            self._nodes.append(Node.leaf(tab))
            self._focused_node = NodeIndex.root()
            return
        focused = self._focused_node
        if focused is None:
            self.push_to_first_leaf(tab)
            return
        node = self[focused]
        if node.is_empty():
            self[focused] = Node.leaf(tab)
            self._focused_node = focused
        elif node.is_leaf():
            node.append_tab(tab)
            self._focused_node = focused
        else:
            self.push_to_first_leaf(tab)

    def remove_tab(self, location: tuple[NodeIndex, TabIndex]) -> Tab | None:
        """Remove and return the tab at ``(node, tab)``; drop the node once empty."""
        node_index, tab_index = location
        node = self[node_index]
        tab = node.remove_tab(tab_index)
        if node.tabs_count() == 0:
            self.remove_leaf(node_index)
        return tab

    def find_tab(self, needle: Tab) -> tuple[NodeIndex, TabIndex] | None:
        """Return the location of the first tab equal to ``needle``, or None."""
        for node_position, node in enumerate(self._nodes):
            if not node.is_leaf() or node.tabs is None:
                continue
            for tab_position, tab in enumerate(node.tabs):
                if tab == needle:
                    return NodeIndex(node_position), TabIndex(tab_position)
        return None