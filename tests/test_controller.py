"""Tests for controller/base.py - the value sync contract shared by all controllers."""

from controller import Controller, OptionController, StringController


class TestSetValue:
    """Test the single write path."""

    def test_writes_bound_property(self, gui, params):
        """set_value() writes through to the object."""
        ctrl = gui.add(params, "label")
        ctrl.set_value("world")
        assert params.label == "world"
        assert ctrl.get_value() == "world"

    def test_callbacks_receive_new_value(self, gui, params, recorder):
        """Change then finish callbacks fire with the new value."""
        ctrl = recorder.attach(gui.add(params, "label"))
        ctrl.set_value("a")
        assert recorder.changes == ["a"]
        assert recorder.finishes == ["a"]

    def test_unfinished_skips_finish_callback(self, gui, params, recorder):
        """finished=False fires only the change callback."""
        ctrl = recorder.attach(gui.add(params, "label"))
        ctrl.set_value("a", False)
        assert recorder.changes == ["a"]
        assert recorder.finishes == []

    def test_callback_order(self, gui, params):
        """The property is written before change, and change before finish."""
        events = []
        ctrl = gui.add(params, "label")
        ctrl.on_change(lambda v: events.append(("change", v, params.label)))
        ctrl.on_finish_change(lambda v: events.append(("finish", v)))
        ctrl.set_value("z")
        assert events == [("change", "z", "z"), ("finish", "z")]

    def test_registering_replaces_callback(self, gui, params):
        """Only the most recently registered callback fires."""
        first, second = [], []
        ctrl = gui.add(params, "label").on_change(first.append).on_change(second.append)
        ctrl.set_value("b")
        assert first == []
        assert second == ["b"]

    def test_refreshes_display(self, gui, params, surface):
        """Every set_value refreshes the controller's view."""
        ctrl = gui.add(params, "label")
        before = surface.refresh_counts[id(ctrl)]
        ctrl.set_value("c")
        assert surface.refresh_counts[id(ctrl)] > before


class TestFluentApi:
    """Test name/enable/disable chaining."""

    def test_name_defaults_to_property(self, gui, params):
        """The label starts as the property name."""
        assert gui.add(params, "label").label == "label"

    def test_name_returns_self(self, gui, params):
        """name() relabels and chains."""
        ctrl = gui.add(params, "label")
        assert ctrl.name("Title") is ctrl
        assert ctrl.label == "Title"

    def test_disable_enable(self, gui, params):
        """disable() and enable(False) disable, enable() re-enables."""
        ctrl = gui.add(params, "label")
        assert ctrl.disable().disabled
        assert not ctrl.enable().disabled
        assert ctrl.enable(False).disabled

    def test_disabled_ignores_user_input(self, gui, params, recorder):
        """User edits on a disabled controller are dropped."""
        ctrl = recorder.attach(gui.add(params, "label").disable())
        ctrl.on_input("ignored")
        assert params.label == "hello"
        assert recorder.changes == []

    def test_disabled_still_accepts_set_value(self, gui, params):
        """Programmatic writes still go through while disabled."""
        ctrl = gui.add(params, "label").disable()
        ctrl.set_value("forced")
        assert params.label == "forced"


class TestLifecycle:
    """Test destroy() and options()."""

    def test_destroy_removes_only_self(self, gui, params, surface):
        """Destroying one controller leaves its siblings in place."""
        first = gui.add(params, "label")
        second = gui.add(params, "shape")
        third = gui.add(params, "speed")

        second.destroy()

        assert gui.children == [first, third]
        assert not surface.is_mounted(second)
        assert surface.is_mounted(first)

    def test_destroy_twice_is_harmless(self, gui, params):
        """A second destroy() does nothing."""
        ctrl = gui.add(params, "label")
        ctrl.destroy()
        ctrl.destroy()
        assert gui.children == []

    def test_options_replaces_controller(self, gui, params):
        """options() swaps in an option controller with the same name."""
        ctrl = gui.add(params, "shape").name("Shape")
        replacement = ctrl.options(["circle", "square"])

        assert isinstance(replacement, OptionController)
        assert replacement.label == "Shape"
        assert replacement.property == "shape"
        assert ctrl not in gui.children
        assert gui.children == [replacement]

    def test_options_appends_at_end(self, gui, params):
        """The replacement is added after existing siblings."""
        ctrl = gui.add(params, "shape")
        other = gui.add(params, "label")
        replacement = ctrl.options(["circle", "square"])
        assert gui.children == [other, replacement]

    def test_repr_names_property(self, gui, params):
        """repr shows the controller class and property."""
        ctrl = gui.add(params, "label")
        assert isinstance(ctrl, StringController)
        assert repr(ctrl) == "<StringController 'label'>"

    def test_property_accessors(self, gui, params):
        """object, property and surface are read-only accessors on every controller."""
        for name in ("object", "property", "surface", "disabled", "label"):
            assert isinstance(Controller.__dict__[name], property)
        ctrl = gui.add(params, "label")
        assert ctrl.object is params
        assert ctrl.property == "label"
        assert ctrl.surface is gui.surface
