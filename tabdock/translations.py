"""Text labels shown by the dock's built-in interface elements."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TabContextMenuTranslations:
    """Labels of the buttons in a tab's context menu."""

    close_button: str = "Close"
    eject_button: str = "Eject"


@dataclass
class Translations:
    """All translatable labels, grouped by interface element."""

    tab_context_menu: TabContextMenuTranslations = field(
        default_factory=TabContextMenuTranslations
    )