"""Unit tests for definition helper functions."""

import pytest

from keyed_di.application.definitions import FactoryDefinition, ObjectDefinition, ValueDefinition
from keyed_di.application.helpers import entry, factory, obj, object_, value
from keyed_di.domain import ConfigurationError, Entry


class Widget:
    def __init__(self, size=1):
        self.size = size


class TestEntryHelper:
    """Test cases for entry()."""

    def test_entry_returns_reference(self):
        """Test that entry() builds an Entry with the identifier."""
        reference = entry("database")

        assert isinstance(reference, Entry)
        assert str(reference) == "database"


class TestObjectHelper:
    """Test cases for object_()."""

    def test_object_defaults(self):
        """Test default parameters and registration."""
        definition = object_(Widget)

        assert isinstance(definition, ObjectDefinition)
        assert definition.class_ is Widget
        assert definition.parameters == []
        assert definition.is_registered() is True

    def test_object_with_parameters_and_unregistered(self):
        """Test passing parameters and the registered flag."""
        definition = object_(Widget, [3], registered=False)

        assert definition.parameters == [3]
        assert definition.is_registered() is False

    def test_object_unknown_class_raises(self):
        """Test that an unknown class path fails immediately."""
        with pytest.raises(ConfigurationError):
            object_("tests.does.not.Exist")

    def test_obj_alias(self):
        """Test that obj is the same helper as object_."""
        assert obj is object_


class TestFactoryHelper:
    """Test cases for factory()."""

    def test_factory_defaults(self):
        """Test default parameters and registration."""

        def make():
            return Widget()

        definition = factory(make)

        assert isinstance(definition, FactoryDefinition)
        assert definition.callable is make
        assert definition.parameters == []
        assert definition.is_registered() is True

    def test_factory_unregistered(self):
        """Test the registered flag."""
        assert factory(Widget, registered=False).is_registered() is False


class TestValueHelper:
    """Test cases for value()."""

    def test_value_defaults(self):
        """Test that value() wraps the literal."""
        definition = value("hello")

        assert isinstance(definition, ValueDefinition)
        assert definition.value == "hello"
        assert definition.is_registered() is True

    def test_value_unregistered(self):
        """Test the registered flag."""
        assert value("hello", registered=False).is_registered() is False
