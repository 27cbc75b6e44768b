"""Content creators and themed widget factories."""

from cinema_manager.factories.base import ContentCreator, UIFactory, Widget
from cinema_manager.factories.content import (
    CONTENT_CREATORS,
    PremiumCreator,
    StandardCreator,
    get_content_creator,
)
from cinema_manager.factories.widgets import (
    UI_FACTORIES,
    DarkThemeButton,
    DarkThemeCheckbox,
    DarkThemeFactory,
    LightThemeButton,
    LightThemeCheckbox,
    LightThemeFactory,
    get_ui_factory,
)

__all__ = [
    # Interfaces
    'ContentCreator',
    'UIFactory',
    'Widget',
    # Content
    'StandardCreator',
    'PremiumCreator',
    'CONTENT_CREATORS',
    'get_content_creator',
    # Widgets
    'DarkThemeButton',
    'LightThemeButton',
    'DarkThemeCheckbox',
    'LightThemeCheckbox',
    'DarkThemeFactory',
    'LightThemeFactory',
    'UI_FACTORIES',
    'get_ui_factory',
]
