"""Unit tests for StructuredError."""

import logging
import pickle

import pytest

from errsets.domain.exceptions import InvalidArgumentError
from errsets.domain.model import structured_error
from errsets.domain.model.structured_error import RESERVED_KEYS, StructuredError

NAME = "ServerError"
MESSAGE = "The PORT value is wrong, must be of type number"


def _error() -> StructuredError:
    return StructuredError(NAME, MESSAGE)


class TestConstruction:

    def test_name_and_message(self):
        err = _error()
        assert err.name == NAME
        assert err.message == MESSAGE
        assert str(err) == MESSAGE

    def test_is_an_exception(self):
        with pytest.raises(StructuredError, match="must be of type number"):
            raise _error()

    @pytest.mark.parametrize("name", [True, None, 1, ["ServerError"]])
    def test_non_string_name_rejected(self, name):
        with pytest.raises(InvalidArgumentError, match="'name'"):
            StructuredError(name, MESSAGE)

    @pytest.mark.parametrize("message", [True, None, 1, {"m": "x"}])
    def test_non_string_message_rejected(self, message):
        with pytest.raises(InvalidArgumentError, match="'message'"):
            StructuredError(NAME, message)

    def test_name_checked_before_message(self):
        with pytest.raises(InvalidArgumentError, match="'name'"):
            StructuredError(None, None)

    def test_invalid_argument_is_a_type_error(self):
        with pytest.raises(TypeError):
            StructuredError(NAME, 404)

    def test_origin_points_at_caller(self):
        err = _error()
        assert err.origin is not None
        assert err.origin[-1].name == "_error"
        assert all(frame.filename != structured_error.__file__ for frame in err.origin)

    def test_repr(self):
        assert repr(_error()) == f"StructuredError(name={NAME!r}, message={MESSAGE!r})"

    def test_pickle_round_trip_keeps_details(self):
        err = _error().add_details({"port": 30})
        clone = pickle.loads(pickle.dumps(err))
        assert clone.name == NAME
        assert clone.message == MESSAGE
        assert clone.port == 30


class TestAddDetails:

    def test_merges_details(self):
        port = "30"
        err = _error().add_details({"value": port, "type": type(port).__name__})
        assert err.value == "30"
        assert err.type == "str"
        assert err.name == NAME
        assert err.message == MESSAGE

    def test_returns_same_instance(self):
        err = _error()
        assert err.add_details({"a": 1}) is err

    def test_chainable(self):
        err = _error().add_details({"a": 1}).add_details({"b": 2})
        assert (err.a, err.b) == (1, 2)

    def test_overwrites_existing_details(self):
        err = _error().add_details({"a": 1}).add_details({"a": 2})
        assert err.a == 2

    def test_name_and_message_can_be_overwritten(self):
        err = _error().add_details({"name": "Other", "message": "changed"})
        assert err.name == "Other"
        assert err.message == "changed"
        assert str(err) == "changed"

    def test_reserved_keys_are_dropped(self):
        err = _error()
        details = {key: "evil" for key in RESERVED_KEYS}
        details["safe"] = "ok"
        err.add_details(details)
        for key in RESERVED_KEYS:
            assert key not in vars(err)
        assert type(err) is StructuredError
        assert err.safe == "ok"

    def test_dunder_keys_are_dropped(self):
        err = _error().add_details({"__class__": dict, "__dict__": {}})
        assert type(err) is StructuredError
        assert err.name == NAME

    def test_method_names_are_dropped(self):
        err = _error().add_details({"add_details": "x", "to_dict": "y"})
        assert callable(err.add_details)
        assert callable(err.to_dict)

    def test_args_key_is_dropped_without_partial_failure(self):
        err = _error().add_details({"a": 1, "args": 5})
        assert err.a == 1
        assert err.args == (NAME, MESSAGE)
        assert err.to_dict() == {"name": NAME, "message": MESSAGE, "a": 1}

    def test_string_args_key_is_dropped(self):
        err = _error().add_details({"args": "abc"})
        assert err.args == (NAME, MESSAGE)

    def test_dropped_keys_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="errsets.domain.model.structured_error"):
            _error().add_details({"to_dict": "y", "constructor": "x"})
        assert "to_dict" in caplog.text
        assert "constructor" in caplog.text

    @pytest.mark.parametrize("details", [False, 42, "x", None, ["a", 1]])
    def test_non_mapping_rejected(self, details):
        with pytest.raises(InvalidArgumentError, match="'details'"):
            _error().add_details(details)

    def test_non_string_key_rejected_without_partial_merge(self):
        err = _error()
        with pytest.raises(InvalidArgumentError, match="keys"):
            err.add_details({"ok": 1, 2: "two"})
        assert not hasattr(err, "ok")


class TestToDict:

    def test_without_details(self):
        assert _error().to_dict() == {"name": NAME, "message": MESSAGE}

    def test_with_details(self):
        err = _error().add_details({"port": 300, "host": "localhost"})
        assert err.to_dict() == {
            "name": NAME,
            "message": MESSAGE,
            "port": 300,
            "host": "localhost",
        }

    def test_details_named_like_core_attributes_are_kept(self):
        err = _error().add_details({"key": "abc", "origin": "svc"})
        assert err.to_dict() == {
            "name": NAME,
            "message": MESSAGE,
            "key": "abc",
            "origin": "svc",
        }

    def test_overwritten_name_is_reported(self):
        err = _error().add_details({"name": "Other"})
        assert err.to_dict() == {"name": "Other", "message": MESSAGE}
