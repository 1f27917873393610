"""The dock state: a collection of surfaces, each holding a tree of tabs."""

from __future__ import annotations

import enum
import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from .geometry import Rect
from .indices import NodeIndex, SurfaceIndex, TabIndex
from .node import Node
from .placement import (
    Append,
    InsertAt,
    InsertSplit,
    Split,
    TabDestination,
    ToEmptySurface,
    ToNode,
    ToWindow,
)
from .translations import Translations
from .tree import Tree
from .window_state import WindowState

Tab = TypeVar("Tab")

TabLocation = tuple[SurfaceIndex, NodeIndex, TabIndex]
DestinationLike = Union[TabDestination, SurfaceIndex, tuple]


class SurfaceKind(enum.Enum):
    """The variant of a :class:`Surface`."""

    EMPTY = "empty"
    MAIN = "main"
    WINDOW = "window"


@dataclass
class Surface:
    """An area in which a tree of nodes is placed.

    The main surface is rendered in the host area; window surfaces float in
    their own windows and carry a :class:`WindowState`. Empty surfaces are
    vacated slots that a new window may reuse.
    """

    kind: SurfaceKind = SurfaceKind.EMPTY
    tree: Tree | None = None
    window_state: WindowState | None = None

    @staticmethod
    def empty() -> Surface:
        """Return an empty (null) surface."""
        return Surface()

    @staticmethod
    def main(tree: Tree) -> Surface:
        """Return a main surface holding ``tree``."""
        return Surface(SurfaceKind.MAIN, tree)

    @staticmethod
    def window(tree: Tree, state: WindowState) -> Surface:
        """Return a window surface holding ``tree`` with window ``state``."""
        return Surface(SurfaceKind.WINDOW, tree, state)

    def is_empty(self) -> bool:
        """Return True if this surface is empty."""
        return self.kind is SurfaceKind.EMPTY


def _as_destination(destination: DestinationLike) -> TabDestination:
    if isinstance(destination, (ToWindow, ToNode, ToEmptySurface)):
        return destination
    if isinstance(destination, SurfaceIndex):
        return ToEmptySurface(destination)
    if isinstance(destination, tuple) and len(destination) == 3:
        return ToNode(*destination)
    raise TypeError(f"not a tab destination: {destination!r}")


class DockState(Generic[Tab]):
    """A collection of surfaces, each storing a tree in which tabs are arranged.

    Indexing with a :class:`SurfaceIndex` yields that surface's :class:`Tree`.
    """

    def __init__(self, tabs: Iterable[Tab]) -> None:
        self._surfaces: list[Surface] = [Surface.main(Tree(tabs))]
        self._focused_surface: SurfaceIndex | None = None
        self.translations = Translations()

    def __repr__(self) -> str:
        return (
            f"DockState(surfaces={len(self._surfaces)}, "
            f"focused_surface={self._focused_surface!r})"
        )

    def _surface_at(self, surface: SurfaceIndex) -> Surface:
        position = operator.index(surface)
        if not 0 <= position < len(self._surfaces):
            raise IndexError(f"surface index {position} out of range")
        return self._surfaces[position]

    def __getitem__(self, surface: SurfaceIndex) -> Tree:
        found = self._surface_at(surface)
        if found.tree is None:
            raise IndexError(
                f"There did not exist a tree at surface index {operator.index(surface)}"
            )
        return found.tree

    def __setitem__(self, surface: SurfaceIndex, tree: Tree) -> None:
        found = self._surface_at(surface)
        if found.tree is None:
            raise IndexError(
                f"There did not exist a tree at surface index {operator.index(surface)}"
            )
        found.tree = tree

    def with_translations(self, translations: Translations) -> DockState[Tab]:
        """Set the translations shown by the dock area and return self."""
        self.translations = translations
        return self

    def main_surface(self) -> Tree:
        """Return the tree of the main surface."""
        return self[SurfaceIndex.main()]

    def get_window_state(self, surface: SurfaceIndex) -> WindowState | None:
        """Return the window state of ``surface``; None unless it is a window."""
        found = self._surface_at(surface)
        return found.window_state if found.kind is SurfaceKind.WINDOW else None

    def find_active_focused(self) -> tuple[Rect, Tab] | None:
        """Return the viewport and active tab of the focused leaf, if any."""
        if self._focused_surface is None:
            return None
        return self[self._focused_surface].find_active_focused()

    def get_surface(self, surface: SurfaceIndex) -> Surface | None:
        """Return the raw surface at ``surface``, or None if it does not exist."""
        position = operator.index(surface)
        if 0 <= position < len(self._surfaces):
            return self._surfaces[position]
        return None

    def is_surface_valid(self, surface: SurfaceIndex) -> bool:
        """Return True if ``surface`` exists and is not empty."""
        found = self.get_surface(surface)
        return found is not None and not found.is_empty()

    def valid_surface_indices(self) -> list[SurfaceIndex]:
        """Return the indices of all non-empty surfaces, in order."""
        return [
            SurfaceIndex(position)
            for position, found in enumerate(self._surfaces)
            if not found.is_empty()
        ]

    def remove_surface(self, surface: SurfaceIndex) -> Surface | None:
        """Remove ``surface`` and return it, or None if it did not exist.

        Raises ValueError for the main surface.
        """
        if surface.is_main():
            raise ValueError("the main surface cannot be removed")
        position = operator.index(surface)
        if not 0 <= position < len(self._surfaces):
            return None
        self._focused_surface = SurfaceIndex.main()
        if position == len(self._surfaces) - 1:
            return self._surfaces.pop()
        removed = self._surfaces[position]
        self._surfaces[position] = Surface.empty()
        return removed

    def set_active_tab(self, location: TabLocation) -> None:
        """Make the tab at ``(surface, node, tab)`` the active tab of its node."""
        surface, node, tab = location
        self[surface].set_active_tab(node, tab)

    def set_focused_node_and_surface(
        self, location: tuple[SurfaceIndex, NodeIndex]
    ) -> None:
        """Focus the leaf at ``(surface, node)``; clear the focus if it is not a leaf."""
        surface, node = location
        if self.is_surface_valid(surface):
            tree = self[surface]
            if 0 <= node.index < len(tree) and tree[node].is_leaf():
                self._focused_surface = surface
                tree.set_focused_node(node)
                return
        self._focused_surface = None

    def _clean_up_source(self, surface: SurfaceIndex, node: NodeIndex) -> None:
        tree = self[surface]
        if tree[node].is_leaf() and tree[node].tabs_count() == 0:
            tree.remove_leaf(node)
        if self[surface].is_empty() and not surface.is_main():
            self.remove_surface(surface)

    def move_tab(self, source: TabLocation, destination: DestinationLike) -> None:
        """Move the tab at ``source`` to ``destination``.

        ``destination`` is a :class:`ToWindow`, :class:`ToNode` or
        :class:`ToEmptySurface`; a ``(surface, node, insert)`` tuple or a bare
        :class:`SurfaceIndex` is accepted as shorthand for the latter two.
        """
        src_surface, src_node, src_tab = source
        target = _as_destination(destination)

        if isinstance(target, ToWindow):
            self.detach_tab(source, target.rect)
            return

        if isinstance(target, ToNode):
            if (
                src_surface == target.surface
                and src_node == target.node
                and self[src_surface][src_node].tabs_count() == 1
            ):
                return
            tab = self[src_surface][src_node].remove_tab(src_tab)
            insert = target.insert
            if isinstance(insert, InsertSplit):
                self[target.surface].split(target.node, insert.split, 0.5, Node.leaf(tab))
            elif isinstance(insert, InsertAt):
                self[target.surface][target.node].insert_tab(insert.index, tab)
            elif isinstance(insert, Append):
                self[target.surface][target.node].append_tab(tab)
            else:
                raise TypeError(f"not a tab insertion: {insert!r}")
        else:
            if not self[target.surface].is_empty():
                raise ValueError("destination surface is not empty")
            tab = self[src_surface][src_node].remove_tab(src_tab)
            self[target.surface] = Tree([tab])

        self._clean_up_source(src_surface, src_node)

    def detach_tab(self, source: TabLocation, window_rect: Rect) -> SurfaceIndex:
        """Move the tab at ``source`` into a new window placed at ``window_rect``.

        Returns the index of the new window surface.
        """
        src_surface, src_node, src_tab = source
        tab = self[src_surface][src_node].remove_tab(src_tab)
        surface = self.add_window([tab])

        state = self.get_window_state(surface)
        assert state is not None
        state.set_position(window_rect.min)
        if src_surface.is_main():
            state.set_size(window_rect.size() * 0.8)
        else:
            state.set_size(window_rect.size())

        self._clean_up_source(src_surface, src_node)
        return surface

    def focused_leaf(self) -> tuple[SurfaceIndex, NodeIndex] | None:
        """Return the focused ``(surface, node)``, or None."""
        surface = self._focused_surface
        if surface is None:
            return None
        leaf = self[surface].focused_leaf()
        return None if leaf is None else (surface, leaf)

    def remove_tab(self, location: TabLocation) -> Tab | None:
        """Remove and return the tab at ``(surface, node, tab)``."""
        surface, node, tab = location
        return self[surface].remove_tab((node, tab))

    def split(
        self,
        location: tuple[SurfaceIndex, NodeIndex],
        split: Split,
        fraction: float,
        new: Node,
    ) -> tuple[NodeIndex, NodeIndex]:
        """Split the node at ``(surface, node)``; see :meth:`Tree.split`."""
        surface, parent = location
        indices = self[surface].split(parent, split, fraction, new)
        self._focused_surface = surface
        return indices

    def _find_empty_surface_index(self) -> SurfaceIndex:
        for position, found in enumerate(self._surfaces[1:], start=1):
            if found.is_empty():
                return SurfaceIndex(position)
        return SurfaceIndex(len(self._surfaces))

    def add_window(self, tabs: Iterable[Tab]) -> SurfaceIndex:
        """Add a window surface holding ``tabs`` and return its index.

        The first vacated slot is reused; the index stays fixed for the
        window's lifetime.
        """
        surface = Surface.window(Tree(tabs), WindowState())
        index = self._find_empty_surface_index()
        if index.index < len(self._surfaces):
            self._surfaces[index.index] = surface
        else:
            self._surfaces.append(surface)
        return index

    def push_to_focused_leaf(self, tab: Tab) -> None:
        """Add ``tab`` to the focused leaf, or to the main surface if none is focused."""
        surface = self._focused_surface
        if surface is None:
            surface = SurfaceIndex.main()
        self[surface].push_to_focused_leaf(tab)

    def push_to_first_leaf(self, tab: Tab) -> None:
        """Add ``tab`` to the first leaf of the main surface."""
        self[SurfaceIndex.main()].push_to_first_leaf(tab)

    def iter_main_surface_nodes(self) -> Iterator[Node]:
        """Iterate over the node slots of the main surface."""
        return iter(self[SurfaceIndex.main()])

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over the node slots of every surface."""
        for found in self._surfaces:
            if found.tree is not None:
                yield from found.tree

    def find_tab(self, needle: Tab) -> TabLocation | None:
        """Return the location of the first tab equal to ``needle`` on any surface."""
        for surface in self.valid_surface_indices():
            found = self[surface].find_tab(needle)
            if found is not None:
                node, tab = found
                return surface, node, tab
        return None

    def find_main_surface_tab(self, needle: Tab) -> tuple[NodeIndex, TabIndex] | None:
        """Return the location of the first tab equal to ``needle`` on the main surface."""
        return self[SurfaceIndex.main()].find_tab(needle)