import pytest

from tabdock.dock_state import DockState, Surface, SurfaceKind
from tabdock.geometry import Pos2, Rect, Vec2
from tabdock.indices import NodeIndex, SurfaceIndex, TabIndex
from tabdock.node import Node
from tabdock.placement import Append, InsertAt, InsertSplit, Split, ToNode, ToWindow
from tabdock.translations import TabContextMenuTranslations, Translations
from tabdock.tree import Tree
from tabdock.window_state import WindowState

MAIN = SurfaceIndex.main()
ROOT = NodeIndex.root()


def test_surface_constructors():
    assert Surface.empty().is_empty()
    tree = Tree(["a"])
    main = Surface.main(tree)
    assert not main.is_empty()
    assert main.kind is SurfaceKind.MAIN
    assert main.tree is tree
    state = WindowState()
    window = Surface.window(tree, state)
    assert window.kind is SurfaceKind.WINDOW
    assert window.window_state is state


def test_new_state_has_tabs_in_main_root():
    state = DockState(["tab1", "tab2"])
    assert state.main_surface().root_node().tabs == ["tab1", "tab2"]
    assert state.valid_surface_indices() == [MAIN]
    assert state.focused_leaf() is None


def test_with_translations():
    translations = Translations(TabContextMenuTranslations("Zamknij", "Przenieś"))
    state = DockState([]).with_translations(translations)
    assert state.translations.tab_context_menu.close_button == "Zamknij"
    assert state.translations.tab_context_menu.eject_button == "Przenieś"


def test_add_window_and_window_state():
    state = DockState(["a"])
    window = state.add_window(["Window Tab"])
    assert state.is_surface_valid(window)
    assert state[window].root_node().tabs == ["Window Tab"]
    window_state = state.get_window_state(window)
    window_state.set_position(Pos2.ZERO).set_size(Vec2.splat(100.0))
    assert window_state.take_next_position() == Pos2.ZERO
    assert window_state.take_next_size() == Vec2.splat(100.0)
    assert state.get_window_state(MAIN) is None


def test_remove_main_surface_raises():
    state = DockState(["a"])
    with pytest.raises(ValueError):
        state.remove_surface(MAIN)


def test_remove_surface_vacates_slot_and_reuses_it():
    state = DockState(["a"])
    first = state.add_window(["w1"])
    second = state.add_window(["w2"])
    removed = state.remove_surface(first)
    assert removed.tree.root_node().tabs == ["w1"]
    assert state.get_surface(first).is_empty()
    assert not state.is_surface_valid(first)
    with pytest.raises(IndexError):
        state[first]
    assert state.valid_surface_indices() == [MAIN, second]
    assert state.add_window(["w3"]) == first


def test_remove_last_surface_and_missing_surface():
    state = DockState(["a"])
    window = state.add_window(["w"])
    assert state.remove_surface(window) is not None
    assert state.get_surface(window) is None
    assert state.remove_surface(window) is None


def test_find_tab_across_surfaces():
    state = DockState(["a", "b"])
    window = state.add_window(["c"])
    assert state.find_tab("b") == (MAIN, ROOT, TabIndex(1))
    assert state.find_tab("c") == (window, ROOT, TabIndex(0))
    assert state.find_tab("missing") is None
    assert state.find_main_surface_tab("c") is None
    assert state.find_main_surface_tab("a") == (ROOT, TabIndex(0))


def test_set_active_tab():
    state = DockState(["a", "b", "c"])
    state.set_active_tab((MAIN, ROOT, TabIndex(2)))
    assert state.main_surface().root_node().active == TabIndex(2)


def test_set_focused_node_and_surface():
    state = DockState(["a"])
    old, new = state.main_surface().split_right(ROOT, 0.5, ["b"])
    state.set_focused_node_and_surface((MAIN, old))
    assert state.focused_leaf() == (MAIN, old)
    state.set_focused_node_and_surface((MAIN, ROOT))
    assert state.focused_leaf() is None
    state.set_focused_node_and_surface((SurfaceIndex(7), ROOT))
    assert state.focused_leaf() is None


def test_push_to_focused_leaf_uses_focused_surface():
    state = DockState(["a"])
    window = state.add_window(["w"])
    state.set_focused_node_and_surface((window, ROOT))
    state.push_to_focused_leaf("x")
    assert state[window].root_node().tabs == ["w", "x"]
    assert state.main_surface().root_node().tabs == ["a"]


def test_push_without_focus_goes_to_main():
    state = DockState(["a"])
    state.push_to_focused_leaf("b")
    state.push_to_first_leaf("c")
    assert state.main_surface().root_node().tabs == ["a", "b", "c"]


def test_split_focuses_new_node():
    state = DockState(["a"])
    old, new = state.split((MAIN, ROOT), Split.BELOW, 0.5, Node.leaf("x"))
    assert state.focused_leaf() == (MAIN, new)
    assert state.main_surface()[old].tabs == ["a"]
    viewport, tab = state.find_active_focused()
    assert tab == "x"
    assert viewport == Rect.nothing()


def test_move_tab_append_to_other_node():
    state = DockState(["a", "b"])
    old, new = state.main_surface().split_right(ROOT, 0.5, ["c"])
    state.move_tab((MAIN, old, TabIndex(0)), ToNode(MAIN, new, Append()))
    assert state.main_surface()[new].tabs == ["c", "a"]
    assert state.main_surface()[old].tabs == ["b"]


def test_move_last_tab_removes_leaf():
    state = DockState(["a"])
    old, new = state.main_surface().split_right(ROOT, 0.5, ["b"])
    state.move_tab((MAIN, new, TabIndex(0)), (MAIN, old, Append()))
    root = state.main_surface().root_node()
    assert root.is_leaf()
    assert root.tabs == ["a", "b"]


def test_move_single_tab_within_own_node_is_noop():
    state = DockState(["a"])
    state.move_tab((MAIN, ROOT, TabIndex(0)), ToNode(MAIN, ROOT, InsertSplit(Split.LEFT)))
    assert state.main_surface().root_node().tabs == ["a"]
    assert len(state.main_surface()) == 1


def test_move_tab_split_creates_new_leaf():
    state = DockState(["a", "b"])
    state.move_tab((MAIN, ROOT, TabIndex(1)), ToNode(MAIN, ROOT, InsertSplit(Split.RIGHT)))
    tree = state.main_surface()
    assert tree.root_node().is_horizontal()
    assert tree[ROOT.left()].tabs == ["a"]
    assert tree[ROOT.right()].tabs == ["b"]


def test_move_out_of_window_removes_window():
    state = DockState(["a"])
    window = state.add_window(["w"])
    state.move_tab((window, ROOT, TabIndex(0)), ToNode(MAIN, ROOT, InsertAt(TabIndex(0))))
    assert state.main_surface().root_node().tabs == ["w", "a"]
    assert not state.is_surface_valid(window)


def test_move_tab_to_empty_surface():
    state = DockState(["a", "b"])
    window = state.add_window(["w"])
    assert state.remove_tab((window, ROOT, TabIndex(0))) == "w"
    assert state[window].is_empty()
    state.move_tab((MAIN, ROOT, TabIndex(0)), window)
    assert list(state[window].tabs()) == ["a"]
    assert state.main_surface().root_node().tabs == ["b"]


def test_move_tab_to_non_empty_surface_raises():
    state = DockState(["a", "b"])
    window = state.add_window(["w"])
    with pytest.raises(ValueError):
        state.move_tab((MAIN, ROOT, TabIndex(0)), window)


def test_detach_tab_from_main_scales_size():
    state = DockState(["a", "b"])
    rect = Rect.from_min_size(Pos2(10.0, 20.0), Vec2(200.0, 100.0))
    window = state.detach_tab((MAIN, ROOT, TabIndex(1)), rect)
    assert state[window].root_node().tabs == ["b"]
    window_state = state.get_window_state(window)
    assert window_state.take_next_position() == rect.min
    assert window_state.take_next_size() == rect.size() * 0.8


def test_detach_tab_from_window_keeps_size_and_removes_source():
    state = DockState(["a"])
    source = state.add_window(["w", "v"])
    rect = Rect.from_min_size(Pos2(1.0, 2.0), Vec2(50.0, 60.0))
    window = state.detach_tab((source, ROOT, TabIndex(0)), rect)
    assert state.get_window_state(window).take_next_size() == rect.size()
    assert state[source].root_node().tabs == ["v"]


def test_move_to_window_destination():
    state = DockState(["a", "b"])
    rect = Rect.from_min_size(Pos2.ZERO, Vec2(10.0, 10.0))
    state.move_tab((MAIN, ROOT, TabIndex(0)), ToWindow(rect))
    location = state.find_tab("a")
    assert location is not None
    assert not location[0].is_main()


def test_iter_nodes_covers_all_surfaces():
    state = DockState(["a"])
    state.main_surface().split_left(ROOT, 0.3, ["b"])
    state.add_window(["w"])
    main_nodes = list(state.iter_main_surface_nodes())
    assert len(main_nodes) == len(state.main_surface())
    all_nodes = list(state.iter_nodes())
    assert len(all_nodes) == len(main_nodes) + 1
    tabs = sorted(tab for node in all_nodes if node.is_leaf() for tab in node.tabs)
    assert tabs == ["a", "b", "w"]


def test_setitem_replaces_tree():
    state = DockState(["a"])
    state[MAIN] = Tree(["z"])
    assert state.main_surface().root_node().tabs == ["z"]
    with pytest.raises(IndexError):
        state[SurfaceIndex(5)] = Tree(["y"])