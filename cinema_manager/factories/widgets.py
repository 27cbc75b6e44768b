"""Themed UI widgets and the factories that produce them."""

import logging
from typing import Dict, Optional, TextIO, Type

from cinema_manager.errors import UnknownVariantError
from cinema_manager.factories.base import UIFactory, Widget

logger = logging.getLogger(__name__)


class ThemedWidget(Widget):
    """Widget whose output is fixed by its theme and kind."""

    THEME = ""
    KIND = ""

    @property
    def theme(self) -> str:
        return self.THEME

    @property
    def kind(self) -> str:
        return self.KIND

    def render(self) -> None:
        logger.debug(f"Rendering {self.THEME} {self.KIND}")
        self._write(f"Rendering {self.THEME} theme {self.KIND}")


class DarkThemeButton(ThemedWidget):
    THEME = "dark"
    KIND = "button"


class LightThemeButton(ThemedWidget):
    THEME = "light"
    KIND = "button"


class DarkThemeCheckbox(ThemedWidget):
    THEME = "dark"
    KIND = "checkbox"


class LightThemeCheckbox(ThemedWidget):
    THEME = "light"
    KIND = "checkbox"


class DarkThemeFactory(UIFactory):
    @property
    def theme(self) -> str:
        return "dark"

    def create_button(self) -> Widget:
        return DarkThemeButton(self.stream)

    def create_checkbox(self) -> Widget:
        return DarkThemeCheckbox(self.stream)


class LightThemeFactory(UIFactory):
    @property
    def theme(self) -> str:
        return "light"

    def create_button(self) -> Widget:
        return LightThemeButton(self.stream)

    def create_checkbox(self) -> Widget:
        return LightThemeCheckbox(self.stream)


UI_FACTORIES: Dict[str, Type[UIFactory]] = {
    "dark": DarkThemeFactory,
    "light": LightThemeFactory,
}


def get_ui_factory(theme: str, stream: Optional[TextIO] = None) -> UIFactory:
    """Look up the widget factory for a theme name."""
    factory_cls = UI_FACTORIES.get(theme)
    if factory_cls is None:
        logger.warning(f"No UI factory for theme: {theme}")
        raise UnknownVariantError("theme", theme, UI_FACTORIES)
    return factory_cls(stream)
