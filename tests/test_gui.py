"""Tests for controller/gui.py - type inference, folders, headers and panel state."""

import pytest

from controller import (
    GUI,
    BooleanController,
    FunctionController,
    Header,
    HeadlessSurface,
    NumberController,
    OptionController,
    StringController,
)
from model import BindingError


class TestAddInference:
    """Test controller selection in add()."""

    @pytest.mark.parametrize(
        "prop,expected",
        [
            ("enabled", BooleanController),
            ("label", StringController),
            ("speed", NumberController),
            ("ratio", NumberController),
            ("ping", FunctionController),
        ],
    )
    def test_picks_controller_from_value(self, gui, params, prop, expected):
        """The initial value's shape picks the controller."""
        assert type(gui.add(params, prop)) is expected

    def test_mapping_objects(self, gui):
        """Mappings bind by key."""
        data = {"count": 3}
        ctrl = gui.add(data, "count", 0, 5)
        assert isinstance(ctrl, NumberController)
        assert ctrl.bounds == (0, 5)

    def test_options_win(self, gui, params):
        """A list third argument always means options."""
        assert isinstance(gui.add(params, "speed", [1, 5, 10]), OptionController)

    def test_undefined_property(self, gui, params):
        """Missing properties raise a BindingError naming them."""
        with pytest.raises(BindingError, match='"missing"'):
            gui.add(params, "missing")

    def test_unsupported_value(self, gui):
        """Values with no controller type raise BindingError."""
        with pytest.raises(BindingError, match="No suitable controller"):
            gui.add({"things": [1, 2]}, "things")

    def test_none_value(self, gui):
        """None has no shape and no controller."""
        with pytest.raises(BindingError):
            gui.add({"nothing": None}, "nothing")

    def test_failed_add_leaves_panel_unchanged(self, gui):
        """Nothing is mounted when add() raises."""
        with pytest.raises(BindingError):
            gui.add({}, "missing")
        assert gui.children == []

    def test_children_in_order(self, gui, params):
        """Children are kept in insertion order."""
        a = gui.add(params, "enabled")
        b = gui.add(params, "label")
        assert gui.children == [a, b]


class TestFolders:
    """Test nested panels."""

    def test_folder_shares_root_surface(self, gui, params, surface):
        """Folders and their controllers draw on the root's surface."""
        folder = gui.add_folder("Nested")
        ctrl = folder.add(params, "speed")
        assert folder.root is gui
        assert folder.surface is surface
        assert ctrl.surface is surface
        assert surface.is_mounted(folder)
        assert surface.is_mounted(ctrl)

    def test_folder_is_not_root(self, gui):
        """Only the top panel is the root."""
        folder = gui.add_folder("Nested")
        assert gui.is_root
        assert not folder.is_root
        assert folder.panel_width is None
        assert not folder.auto_place

    def test_controllers_depth_first(self, gui, params):
        """controllers() walks folders in order."""
        a = gui.add(params, "enabled")
        folder = gui.add_folder("Inner")
        b = folder.add(params, "label")
        c = gui.add(params, "speed")
        gui.add_header("Not a controller")
        assert list(gui.controllers()) == [a, b, c]
        assert gui.folders() == [folder]

    def test_update_display_refreshes_all(self, gui, params):
        """update_display() re-reads every controller's value."""
        flag = gui.add_folder("Inner").add(params, "enabled")
        params.enabled = False
        gui.update_display()
        assert flag.checked is False

    def test_destroy_folder(self, gui, params, surface):
        """Destroying a folder destroys its children too."""
        folder = gui.add_folder("Inner")
        ctrl = folder.add(params, "label")
        folder.destroy()
        assert gui.children == []
        assert folder.children == []
        assert not surface.is_mounted(folder)
        assert not surface.is_mounted(ctrl)


class TestHeader:
    """Test header rows."""

    def test_add_header(self, gui, surface):
        """Headers are children with a label."""
        header = gui.add_header("Section")
        assert isinstance(header, Header)
        assert gui.children == [header]
        assert header.label == "Section"
        assert surface.is_mounted(header)

    def test_rename_and_destroy(self, gui):
        """Headers can be renamed and removed."""
        header = gui.add_header("Section").name("Renamed")
        assert header.label == "Renamed"
        header.destroy()
        assert gui.children == []


class TestPanelState:
    """Test title, open/close and width."""

    def test_defaults(self, gui):
        """A root panel starts open, named Controls, auto-placed."""
        assert gui.label == "Controls"
        assert not gui.closed
        assert gui.auto_place
        assert gui.panel_width == 48

    def test_open_close_toggle(self, gui):
        """open(False), close() and toggle() flip the closed state."""
        assert gui.close().closed
        assert not gui.open().closed
        assert gui.open(False).closed
        assert not gui.toggle().closed
        assert gui.toggle().closed

    def test_name_and_width(self, gui):
        """name() and width() update the root."""
        gui.name("Tweaks").width(None)
        assert gui.label == "Tweaks"
        assert gui.panel_width is None

    def test_auto_place_tracks_window_height(self, surface):
        """An auto-placed root follows resize notifications."""
        gui = GUI(surface=surface)
        assert gui.window_height == 24
        surface.notify_resize(40)
        assert gui.window_height == 40

    def test_manual_place_ignores_resize(self):
        """A root that isn't auto-placed doesn't listen for resizes."""
        surface = HeadlessSurface()
        gui = GUI(auto_place=False, surface=surface)
        surface.notify_resize(40)
        assert gui.window_height is None

    def test_destroy_root_stops_listening(self, surface):
        """A destroyed root no longer follows resizes."""
        gui = GUI(surface=surface)
        gui.destroy()
        surface.notify_resize(50)
        assert gui.window_height == 24

    def test_default_surface(self):
        """A GUI without a surface draws headless."""
        assert isinstance(GUI().surface, HeadlessSurface)
