"""src/filepeek/features/browser/usecases/menu_builder.py
What: Number static actions and directory files into menu options.
Why: Rebuild the menu from a fresh listing on every loop pass.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, final

from filepeek.config.settings import BrowserSettings
from filepeek.features.browser.domain.models import MenuOption, OptionKind

from .file_lister import list_files

# Static entries always lead the menu in this order.
STATIC_OPTIONS: Final[tuple[tuple[OptionKind, str], ...]] = (
    (OptionKind.EXIT, "Exit"),
    (OptionKind.GREET, "Say hello"),
)


def build_menu(file_names: Sequence[str]) -> list[MenuOption]:
    """Combine static options and ``file_names`` into options numbered from 1."""

    options = [
        MenuOption(index=index, label=label, kind=kind)
        for index, (kind, label) in enumerate(STATIC_OPTIONS, start=1)
    ]
    offset = len(options)
    for position, name in enumerate(file_names, start=1):
        options.append(
            MenuOption(
                index=offset + position,
                label=name,
                kind=OptionKind.FILE,
                file_name=name,
            )
        )
    return options


@final
class DirectoryMenuProvider:
    """Menu provider backed by the configured directory."""

    def __init__(self, settings: BrowserSettings) -> None:
        self._settings = settings

    def list_file_names(self) -> list[str]:
        """List the directory now, applying the exclusion set."""

        return list_files(self._settings.target_dir, self._settings.excluded_names)

    def get_options(self) -> list[MenuOption]:
        """Build the menu from the directory's current contents."""

        return build_menu(self.list_file_names())


__all__ = ["DirectoryMenuProvider", "STATIC_OPTIONS", "build_menu"]
