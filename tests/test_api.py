"""
Tests for the JDTester API

Covers the front door: construction, test() lifecycle, options and the
shared helpers reachable from the class.
"""
import pytest
from jdtester import JDTester, ConfigurationError, UNDEFINED


@pytest.fixture
def product_schema():
    """Schema for a small product record."""
    return {
        "type": "object",
        "data": {
            "id": {"type": "number"},
            "name": {"type": "string"},
        },
    }


@pytest.fixture
def bad_product():
    """Product whose name is a number."""
    return {"id": 1, "name": 42}


class TestInitialization:
    """Test JDTester construction."""

    def test_create_tester(self, product_schema):
        """Test that a tester can be created from a schema."""
        tester = JDTester(product_schema)
        assert tester.schema is product_schema

    def test_errors_empty_before_first_test(self, product_schema):
        """Test that no findings exist before test() is called."""
        tester = JDTester(product_schema)
        assert tester.errors == []

    def test_default_options(self, product_schema):
        """Test that default options come from the bundled config."""
        tester = JDTester(product_schema)
        assert tester.options == {"break_on_error": False, "root_path": "DATA"}

    def test_break_on_error_is_accepted(self, product_schema):
        """Test that the reserved break_on_error option is accepted."""
        tester = JDTester(product_schema, {"break_on_error": True})
        assert tester.options["break_on_error"] is True

    def test_invalid_option_type(self, product_schema):
        """Test that a wrongly typed option is rejected."""
        with pytest.raises(ConfigurationError):
            JDTester(product_schema, {"break_on_error": "yes"})

    def test_unknown_option_ignored(self, product_schema, bad_product):
        """Test that unknown options are accepted and change nothing."""
        tester = JDTester(product_schema, {"stopEarly": True})
        assert len(tester.test(bad_product)) == 1

    def test_break_on_error_alias(self, product_schema):
        """Test that the camelCase breakOnError spelling is accepted."""
        tester = JDTester(product_schema, {"breakOnError": True})
        assert tester.options["break_on_error"] is True

    def test_options_must_be_dict(self, product_schema):
        """Test that non-dict options are rejected."""
        with pytest.raises(ConfigurationError):
            JDTester(product_schema, ["break_on_error"])


class TestScenarios:
    """Reference scenarios for the validator."""

    def test_number_above_max(self):
        """Test that a number above max yields exactly one Max finding."""
        tester = JDTester({"type": "number", "min": 0, "max": 10})
        errors = tester.test(15)

        assert errors == [
            {
                "path": "DATA",
                "error": "Max value validation failed",
                "value": 15,
                "expected": 10,
            }
        ]

    def test_object_property_type(self, product_schema, bad_product):
        """Test that a mistyped property is reported at its path."""
        tester = JDTester(product_schema)
        errors = tester.test(bad_product)

        assert len(errors) == 1
        assert errors[0]["path"] == "DATA.name"
        assert errors[0]["error"] == "Type validation failed"
        assert errors[0]["value"] == 42
        assert errors[0]["expected"] == "string"

    def test_array_element_type(self):
        """Test that a mistyped element is reported at its index."""
        tester = JDTester({"type": "array", "elements": {"type": "number"}})
        errors = tester.test([1, "x", 3])

        assert len(errors) == 1
        assert errors[0]["path"] == "DATA[1]"
        assert errors[0]["value"] == "x"


class TestLifecycle:
    """Test per-call accumulation behaviour."""

    def test_findings_reset_between_calls(self, product_schema, bad_product):
        """Test that a second call does not carry over earlier findings."""
        tester = JDTester(product_schema)

        assert len(tester.test(bad_product)) == 1
        assert tester.test({"id": 2, "name": "widget"}) == []
        assert tester.errors == []

    def test_errors_attribute_matches_return(self, product_schema, bad_product):
        """Test that test() also stores its findings on the instance."""
        tester = JDTester(product_schema)
        errors = tester.test(bad_product)
        assert tester.errors == errors
        assert not tester.is_valid()

    def test_valid_data(self, product_schema):
        """Test that valid data produces no findings."""
        tester = JDTester(product_schema)
        assert tester.test({"id": 7, "name": "bolt"}) == []
        assert tester.is_valid()

    def test_instances_are_independent(self, product_schema, bad_product):
        """Test that two testers never share findings."""
        first = JDTester(product_schema)
        second = JDTester(product_schema)

        first.test(bad_product)
        second.test({"id": 1, "name": "ok"})

        assert len(first.errors) == 1
        assert second.errors == []

    def test_every_finding_reported(self):
        """Test that all findings are reported, not just the first."""
        tester = JDTester({
            "type": "object",
            "data": {
                "a": {"type": "number"},
                "b": {"type": "number"},
                "c": {"type": "number"},
            },
        }, {"break_on_error": True})

        errors = tester.test({"a": "x", "b": "y", "c": "z"})

        assert [e["path"] for e in errors] == ["DATA.a", "DATA.b", "DATA.c"]

    def test_absent_root(self):
        """Test that calling test() with no data checks an absent value."""
        tester = JDTester({"type": "number"})
        errors = tester.test()

        assert errors[0]["error"] == "Required validation failed"
        assert errors[0]["value"] is UNDEFINED

    def test_optional_absent_root(self):
        """Test that an optional absent root is valid."""
        tester = JDTester({"type": "number", "required": False})
        assert tester.test() == []


class TestOptions:
    """Test option effects on reports."""

    def test_custom_root_path(self, product_schema, bad_product):
        """Test that root_path replaces the DATA prefix."""
        tester = JDTester(product_schema, {"root_path": "product"})
        errors = tester.test(bad_product)
        assert errors[0]["path"] == "product.name"


class TestSharedHelpers:
    """Test helpers exposed on the class."""

    def test_common_positive_number(self):
        """Test the positive_number fragment."""
        tester = JDTester(JDTester.common.positive_number)

        assert tester.test(3) == []
        assert tester.test(-1)[0]["error"] == "Min value validation failed"

    def test_common_not_empty_string(self):
        """Test the not_empty_string fragment."""
        tester = JDTester(JDTester.common.not_empty_string)

        assert tester.test("text") == []
        assert [e["error"] for e in tester.test("   ")] == ["fn() validation failed"]

    def test_common_not_empty_string_wrong_type(self):
        """Test that non-strings only fail the type rule."""
        tester = JDTester(JDTester.common.not_empty_string)
        assert [e["error"] for e in tester.test(5)] == ["Type validation failed"]

    def test_common_camel_case_aliases(self):
        """Test that the camelCase names are the same fragments."""
        assert JDTester.common.positiveNumber is JDTester.common.positive_number
        assert JDTester.common.notEmptyString is JDTester.common.not_empty_string

        assert JDTester(JDTester.common.positiveNumber).test(-1)[0]["expected"] == 0
        assert JDTester(JDTester.common.notEmptyString).test("") != []

    def test_common_fragment_in_larger_schema(self):
        """Test that fragments compose inside other schemas."""
        tester = JDTester({
            "type": "object",
            "data": {"price": JDTester.common.positive_number},
        })
        errors = tester.test({"price": -5})
        assert errors[0]["path"] == "DATA.price"

    def test_diff_available_on_class(self):
        """Test that diff is reachable without an instance."""
        result = JDTester.diff({"a": 1}, {"a": 2})
        assert result["leftDiff"] == {"a": 1}
        assert result["rightDiff"] == {"a": 2}
        assert result["common"] is None
