"""Unit tests for domain exceptions."""

import pytest

from keyed_di.domain.exceptions import (
    CircularDependencyError,
    ConfigurationError,
    ContainerRuntimeError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
    UnexpectedValueError,
)


class TestDIException:
    """Test cases for the base DIException class."""

    def test_di_exception_is_exception(self):
        """Test that DIException inherits from Exception."""
        assert issubclass(DIException, Exception)

    def test_di_exception_can_be_raised(self):
        """Test that DIException can be raised with a message."""
        with pytest.raises(DIException, match="Test error"):
            raise DIException("Test error")

    @pytest.mark.parametrize(
        "exception_class",
        [
            NotFoundError,
            InvalidArgumentError,
            ConfigurationError,
            ContainerRuntimeError,
            UnexpectedValueError,
            CircularDependencyError,
        ],
    )
    def test_all_errors_inherit_from_di_exception(self, exception_class):
        """Test that every error kind can be caught as DIException."""
        assert issubclass(exception_class, DIException)


class TestNotFoundError:
    """Test cases for the NotFoundError class."""

    def test_not_found_error_keeps_identifier(self):
        """Test that the missing identifier is accessible."""
        error = NotFoundError("database")

        assert error.identifier == "database"

    def test_not_found_error_message_names_identifier(self):
        """Test that the message contains the identifier."""
        error = NotFoundError("database")

        assert "'database'" in str(error)
        assert str(error).startswith("No entry found")

    def test_not_found_error_is_distinct_from_runtime_error(self):
        """Test that a missing entry cannot be mistaken for a broken one."""
        assert not issubclass(NotFoundError, ContainerRuntimeError)
        assert not issubclass(ContainerRuntimeError, NotFoundError)


class TestContainerRuntimeError:
    """Test cases for the ContainerRuntimeError class."""

    def test_runtime_error_without_identifier(self):
        """Test that identifier defaults to None."""
        error = ContainerRuntimeError("Factory failed")

        assert error.identifier is None
        assert str(error) == "Factory failed"

    def test_runtime_error_with_identifier(self):
        """Test that identifier is stored when given."""
        error = ContainerRuntimeError("Error getting 'db'", "db")

        assert error.identifier == "db"

    def test_runtime_error_chains_cause(self):
        """Test that the original exception is kept as __cause__."""
        original = ValueError("boom")

        with pytest.raises(ContainerRuntimeError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise ContainerRuntimeError("wrapped") from e

        assert exc_info.value.__cause__ is original


class TestCircularDependencyError:
    """Test cases for the CircularDependencyError class."""

    def test_circular_dependency_error_with_simple_chain(self):
        """Test CircularDependencyError with a simple dependency chain."""
        chain = ["service.a", "service.b", "service.a"]
        error = CircularDependencyError(chain)

        assert error.dependency_chain == chain
        assert "service.a -> service.b -> service.a" in str(error)

    def test_circular_dependency_error_with_self_reference(self):
        """Test CircularDependencyError when an entry depends on itself."""
        error = CircularDependencyError(["loop", "loop"])

        assert str(error) == "Circular dependency detected: loop -> loop"


class TestPlainErrors:
    """Test cases for errors carrying only a message."""

    @pytest.mark.parametrize("exception_class", [InvalidArgumentError, ConfigurationError, UnexpectedValueError])
    def test_plain_error_message(self, exception_class):
        """Test that message-only errors keep their message."""
        error = exception_class("Something is wrong")

        assert str(error) == "Something is wrong"
