"""Tests for the EachValidator base class and option coercion."""

from typing import Any

import pytest
from pydantic import ValidationError

from canhas.domain.record import TrackedRecord
from canhas.validators.base import EachValidator, RuleContext, is_blank
from canhas.validators.options import RuleOptions, UrlOptions, WriteOnceOptions
from canhas.validators.write_once import WriteOnceValidator


class _SeenValidator(EachValidator):
    rule_name = "seen"

    def validate_each(self, record: Any, attribute: str, value: Any) -> None:
        record.errors.add(attribute, "seen", {"value": value})


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, False, "", "   ", [], {}, (), set(), b""])
    def test_blank(self, value: object) -> None:
        assert is_blank(value)

    @pytest.mark.parametrize("value", [0, True, "x", [None], 0.0])
    def test_not_blank(self, value: object) -> None:
        assert not is_blank(value)


class TestEachValidator:
    def test_requires_attributes(self) -> None:
        with pytest.raises(ValueError, match="at least one attribute"):
            _SeenValidator([])

    def test_calls_validate_each_per_attribute(self) -> None:
        record = TrackedRecord({"a": 1, "b": 2})
        _SeenValidator(["a", "b"]).validate(record)
        assert [(e.attribute, e.options["value"]) for e in record.errors] == [("a", 1), ("b", 2)]

    def test_allow_nil(self) -> None:
        record = TrackedRecord({"a": None, "b": ""})
        _SeenValidator(["a", "b"], {"allow_nil": True}).validate(record)
        assert record.errors.attributes() == ["b"]

    def test_allow_blank(self) -> None:
        record = TrackedRecord({"a": None, "b": " ", "c": "x"})
        _SeenValidator(["a", "b", "c"], {"allow_blank": True}).validate(record)
        assert record.errors.attributes() == ["c"]

    def test_from_config_default(self) -> None:
        validator = _SeenValidator.from_config(("a",), {"message": "m"}, RuleContext())
        assert validator.attributes == ("a",)
        assert validator.options.message == "m"

    def test_error_metadata_omits_unset_message(self) -> None:
        assert _SeenValidator(["a"]).error_metadata() == {"allow_nil": False, "allow_blank": False}


class TestOptionCoercion:
    def test_mapping_to_rule_model(self) -> None:
        validator = WriteOnceValidator(["a"], {"ignore_identical": True})
        assert validator.options == WriteOnceOptions(ignore_identical=True)

    def test_model_instance_kept(self) -> None:
        options = WriteOnceOptions(ignore_identical=True)
        assert WriteOnceValidator(["a"], options).options is options

    def test_foreign_options_model_converted(self) -> None:
        validator = WriteOnceValidator(["a"], UrlOptions(message="m"))
        assert isinstance(validator.options, WriteOnceOptions)
        assert validator.options.message == "m"

    def test_extra_keys_pass_through(self) -> None:
        options = RuleOptions.model_validate({"count": 3})
        assert options.error_metadata()["count"] == 3

    def test_bad_types_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WriteOnceValidator(["a"], {"ignore_identical": "definitely"})

    def test_options_frozen(self) -> None:
        options = WriteOnceOptions()
        with pytest.raises(ValidationError):
            options.ignore_identical = True  # type: ignore[misc]
