"""Tests for the Optional error taxonomy."""

import pytest

from optionkit.domain.errors import InvalidArgumentError, NoSuchElementError, OptionalError


class TestHierarchy:
    @pytest.mark.parametrize("cls", [InvalidArgumentError, NoSuchElementError])
    def test_subclasses_share_base(self, cls: type[OptionalError]) -> None:
        assert issubclass(cls, OptionalError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert not issubclass(InvalidArgumentError, LookupError)

    def test_no_such_element_is_lookup_error(self) -> None:
        assert issubclass(NoSuchElementError, LookupError)
        assert not issubclass(NoSuchElementError, ValueError)


class TestMessages:
    def test_default_messages(self) -> None:
        assert InvalidArgumentError().message == "Value can't be None"
        assert NoSuchElementError().message == "There is no value set for this optional"
        assert OptionalError().message == "Optional operation failed"

    def test_custom_message(self) -> None:
        err = NoSuchElementError("nothing left")
        assert err.message == "nothing left"
        assert str(err) == "nothing left"
