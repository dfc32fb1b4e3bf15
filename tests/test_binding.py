"""Tests for model/binding.py - value shapes and property access."""

from enum import Enum
from types import SimpleNamespace

import pytest

from model import Binding, BindingError, ValueShape, classify, is_options_spec


class Color(Enum):
    RED = 1
    BLUE = 2


class TestClassify:
    """Test runtime shape detection."""

    def test_bool_before_number(self):
        """bool is an int subclass but classifies as BOOLEAN."""
        assert classify(True) is ValueShape.BOOLEAN
        assert classify(False) is ValueShape.BOOLEAN

    def test_primitives(self):
        """Strings and numbers get their own shapes."""
        assert classify("x") is ValueShape.STRING
        assert classify(3) is ValueShape.NUMBER
        assert classify(2.5) is ValueShape.NUMBER

    def test_callable(self):
        """Functions classify as FUNCTION."""
        assert classify(lambda: None) is ValueShape.FUNCTION
        assert classify(print) is ValueShape.FUNCTION

    def test_objects(self):
        """Everything else is an OBJECT."""
        assert classify({"r": 1}) is ValueShape.OBJECT
        assert classify([1, 2]) is ValueShape.OBJECT

    def test_none_has_no_shape(self):
        """None matches no shape."""
        assert classify(None) is None


class TestIsOptionsSpec:
    """Test which third arguments to add() mean options."""

    def test_sequences_and_mappings(self):
        """Lists, tuples and mappings are option specs."""
        assert is_options_spec([1, 2])
        assert is_options_spec((1, 2))
        assert is_options_spec({"a": 1})

    def test_enum_class(self):
        """An Enum class is an option spec, a member is not."""
        assert is_options_spec(Color)
        assert not is_options_spec(Color.RED)

    def test_numbers_are_not_options(self):
        """A number (a minimum) or None is not an option spec."""
        assert not is_options_spec(0)
        assert not is_options_spec(None)
        assert not is_options_spec("abc")


class TestBinding:
    """Test reading and writing through a binding."""

    def test_mapping(self):
        """Mappings are accessed by key."""
        data = {"speed": 1}
        binding = Binding(data, "speed")
        assert binding.is_mapping
        binding.set(2)
        assert data["speed"] == 2
        assert binding.get() == 2

    def test_object(self):
        """Other objects are accessed by attribute."""
        obj = SimpleNamespace(speed=1)
        binding = Binding(obj, "speed")
        assert not binding.is_mapping
        binding.set(3)
        assert obj.speed == 3

    def test_is_defined(self):
        """Missing keys and attributes are undefined, None is defined."""
        assert Binding({"a": None}, "a").is_defined()
        assert not Binding({}, "a").is_defined()
        assert not Binding(SimpleNamespace(), "a").is_defined()

    def test_require_raises_for_undefined(self):
        """require() names the missing property."""
        with pytest.raises(BindingError, match='Property "missing"'):
            Binding({}, "missing").require()
