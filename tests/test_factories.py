"""
Unit tests for content creators and widget factories
====================================================
"""

import io

import pytest
from pydantic import ValidationError

from cinema_manager.errors import UnknownVariantError
from cinema_manager.factories import (
    CONTENT_CREATORS,
    ContentCreator,
    DarkThemeFactory,
    LightThemeFactory,
    PremiumCreator,
    StandardCreator,
    UIFactory,
    get_content_creator,
    get_ui_factory,
)


class TestContentCreators:
    def test_standard_creator(self):
        item = StandardCreator().create_item("Inception")
        assert item.get_kind() == "Standard"
        assert item.get_title() == "Inception"

    def test_premium_creator(self):
        item = PremiumCreator().create_item("Inception")
        assert item.get_kind() == "PremiumFormat"
        assert item.get_title() == "Inception"

    @pytest.mark.parametrize("title", ["", "  Dune: Part Two  ", "Amélie"])
    def test_title_kept_verbatim(self, title):
        assert StandardCreator().create_item(title).title == title

    def test_items_are_immutable(self):
        item = StandardCreator().create_item("Inception")
        with pytest.raises(ValidationError):
            item.title = "Tenet"

    def test_new_kind_only_needs_a_subclass(self):
        class ClassicCreator(ContentCreator):
            @property
            def kind(self):
                return "Classic"

        item = ClassicCreator().create_item("Casablanca")
        assert item.kind == "Classic"
        # existing creators untouched
        assert StandardCreator().create_item("Casablanca").kind == "Standard"

    def test_creator_abstract(self):
        with pytest.raises(TypeError):
            ContentCreator()


class TestContentLookup:
    @pytest.mark.parametrize("kind, cls", [("Standard", StandardCreator), ("PremiumFormat", PremiumCreator)])
    def test_lookup_known_kind(self, kind, cls):
        creator = get_content_creator(kind)
        assert isinstance(creator, cls)
        assert creator.create_item("Inception").kind == kind

    def test_lookup_unknown_kind(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            get_content_creator("Drive-In")
        assert "Drive-In" in str(exc_info.value)
        assert exc_info.value.known == sorted(CONTENT_CREATORS)

    def test_unknown_kind_is_key_error(self):
        with pytest.raises(KeyError):
            get_content_creator("Drive-In")


class TestWidgetFactories:
    def test_dark_button_render(self, capsys):
        result = DarkThemeFactory().create_button().render()
        assert result is None
        assert capsys.readouterr().out == "Rendering dark theme button\n"

    def test_light_button_render(self, capsys):
        LightThemeFactory().create_button().render()
        assert capsys.readouterr().out == "Rendering light theme button\n"

    def test_render_is_deterministic_and_theme_distinct(self):
        outputs = {}
        for factory_cls in (DarkThemeFactory, LightThemeFactory):
            runs = []
            for _ in range(2):
                stream = io.StringIO()
                factory_cls(stream).create_button().render()
                runs.append(stream.getvalue())
            assert runs[0] == runs[1]
            outputs[factory_cls] = runs[0]
        assert outputs[DarkThemeFactory] != outputs[LightThemeFactory]

    @pytest.mark.parametrize("factory_cls", [DarkThemeFactory, LightThemeFactory])
    def test_all_widgets_share_factory_theme(self, factory_cls):
        factory = factory_cls()
        widgets = [factory.create_button(), factory.create_checkbox()]
        assert {w.theme for w in widgets} == {factory.theme}
        assert [w.kind for w in widgets] == ["button", "checkbox"]

    def test_checkbox_render_writes_to_factory_stream(self):
        stream = io.StringIO()
        LightThemeFactory(stream).create_checkbox().render()
        assert stream.getvalue() == "Rendering light theme checkbox\n"

    def test_factory_abstract(self):
        with pytest.raises(TypeError):
            UIFactory()


class TestWidgetLookup:
    def test_lookup_known_theme(self):
        stream = io.StringIO()
        factory = get_ui_factory("dark", stream)
        assert isinstance(factory, DarkThemeFactory)
        factory.create_button().render()
        assert stream.getvalue() == "Rendering dark theme button\n"

    def test_lookup_unknown_theme(self):
        with pytest.raises(UnknownVariantError, match="high-contrast"):
            get_ui_factory("high-contrast")
