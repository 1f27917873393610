# tabdock

`tabdock` is a toolkit-independent model of a docking layout. A layout is held
by a `DockState` (in `tabdock.dock_state`), which keeps:

- a **main surface**, and any number of **window surfaces** (tabs that were
  undocked into floating windows);
- one binary **tree** (`tabdock.tree.Tree`) per surface, whose nodes
  (`tabdock.node.Node`) are either leaves holding tabs or horizontal/vertical
  splits that divide their area by a fraction.

Tabs can be any Python objects; tabs are found by equality. The model tracks
focus, the active tab of every leaf and the requested position and size of each
window.

## Installation

```
pip install tabdock
```

## Building a layout

```python
from tabdock.dock_state import DockState
from tabdock.indices import NodeIndex

dock = DockState(["tab1", "tab2"])
tree = dock.main_surface()

# Put "tab3" to the left of the root; the old node keeps 30% of the area.
old, new = tree.split_left(NodeIndex.root(), 0.3, ["tab3"])
tree.split_below(old, 0.7, ["tab4"])
tree.split_below(new, 0.5, ["tab5"])

print(tree.num_tabs())               # 5
print(list(tree.tabs()))             # every tab, node by node
print(dock.find_tab("tab4"))         # (SurfaceIndex, NodeIndex, TabIndex)
```

Every split returns the indices of the old node and the new node and focuses
the new one. A fraction outside `0..=1`, splitting an empty node, or a new node
without tabs raises `ValueError`.

Nodes are stored in a flat list laid out like a binary heap: the root is at
index 0 and the children of node `n` are at `2n + 1` and `2n + 2`. A `Tree`
can be indexed with a `NodeIndex`, iterated over (empty slots included) and
asked for `len()`.

## Moving tabs

```python
from tabdock.geometry import Pos2, Rect, Vec2
from tabdock.placement import InsertSplit, Split, ToNode

location = dock.find_tab("tab2")

# Split the node holding "tab3" and put "tab2" below it.
surface, node, _ = dock.find_tab("tab3")
dock.move_tab(location, ToNode(surface, node, InsertSplit(Split.BELOW)))

# Undock a tab into a new window.
window = dock.detach_tab(dock.find_tab("tab4"),
                         Rect.from_min_size(Pos2(10, 10), Vec2(400, 300)))
state = dock.get_window_state(window)
state.set_position(Pos2(0, 0))
state.set_size(Vec2.splat(100))
```

Destinations for `move_tab` are `ToWindow(rect)`, `ToNode(surface, node,
insert)` and `ToEmptySurface(surface)`; the insertion is one of
`InsertSplit(split)`, `InsertAt(index)` or `Append()`. A `(surface, node,
insert)` tuple or a bare `SurfaceIndex` is accepted as shorthand. A leaf left
without tabs is removed, and so is a window surface left without nodes.

When a tab is detached from the main surface the new window is sized to 80% of
the given rectangle; from a window surface, to the full rectangle. The window
state holds these as requests, read and cleared with `take_next_position()` and
`take_next_size()`.

## Windows and focus

```python
surface = dock.add_window(["floating"])
dock.set_focused_node_and_surface((surface, NodeIndex.root()))
dock.push_to_focused_leaf("also floating")
print(dock.focused_leaf())
```

Removing a window surface with `remove_surface` leaves an empty slot (or drops
the last slot); the next `add_window` reuses the first empty slot. The main
surface cannot be removed.

## Translations

Labels for tab context menus are kept with the state:

```python
from tabdock.translations import TabContextMenuTranslations, Translations

dock = DockState(["a"]).with_translations(
    Translations(TabContextMenuTranslations(close_button="Zamknij",
                                            eject_button="Odłącz"))
)
```

The defaults are `"Close"` and `"Eject"`.

## What the package does not do

`tabdock` only models the layout. It draws nothing, handles no input and opens
no windows: rendering the surfaces, tab bars and context menus, and turning
drags and clicks into calls such as `move_tab`, is left to the user interface
code that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```