"""Unit tests for records template parsing and record synthesis."""

import pytest

from bridgemock.core.errors import InvalidAttributeError
from bridgemock.core.models import BridgeRequest
from bridgemock.synthesis import build_record, default_records_template, parse_attribute, split_attributes


def make_request(**kwargs) -> BridgeRequest:
    kwargs.setdefault("structure", "Users")
    return BridgeRequest(**kwargs)


class TestSplitAttributes:
    """Test the escaped-comma aware splitter."""

    def test_plain_split(self):
        """Test unescaped commas separate attributes."""
        assert split_attributes("a:1,b:2,c:3") == ["a:1", "b:2", "c:3"]

    def test_escaped_comma_does_not_split(self):
        """Test an escaped comma stays inside its entry."""
        assert split_attributes("a:a $,b:b \\, $") == ["a:a $", "b:b , $"]

    def test_other_backslashes_are_kept(self):
        """Test backslashes not followed by a comma are left alone."""
        assert split_attributes("path:C:\\temp,x:1") == ["path:C:\\temp", "x:1"]

    def test_trailing_backslash(self):
        """Test a backslash at the end of the template is kept."""
        assert split_attributes("a:1\\") == ["a:1\\"]

    def test_trailing_empty_entries_dropped(self):
        """Test empty entries after the last attribute are dropped."""
        assert split_attributes("a:1,,") == ["a:1"]

    def test_leading_empty_entry_kept(self):
        """Test an empty first entry is kept so it can be rejected later."""
        assert split_attributes(",a:1") == ["", "a:1"]


class TestParseAttribute:
    """Test NAME:VALUE parsing."""

    def test_splits_on_first_colon(self):
        """Test only the first colon separates name and value."""
        assert parse_attribute("time:12:30") == ("time", "12:30")

    def test_empty_value(self):
        """Test an attribute may have an empty value."""
        assert parse_attribute("name:") == ("name", "")

    def test_missing_colon_raises(self):
        """Test the offending attribute is named in the error."""
        with pytest.raises(InvalidAttributeError) as exc_info:
            parse_attribute("broken")

        assert exc_info.value.attribute == "broken"
        assert "'broken'" in str(exc_info.value)

    def test_invalid_attribute_is_value_error(self):
        """Test InvalidAttributeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_attribute("")


class TestBuildRecord:
    """Test the record template algorithm."""

    def test_default_template_from_fields(self):
        """Test the default template pairs each field with "<field> $"."""
        assert default_records_template(["name", "id"]) == "name:name $,id:id $"

    def test_record_from_fields(self):
        """Test a record built from fields keeps field order."""
        request = make_request(fields=["name", "id"])
        record = build_record(request, 1)
        assert record == {"name": "name 1", "id": "id 1"}
        assert list(record) == ["name", "id"]

    def test_records_parameter_overrides_fields(self):
        """Test the records parameter wins over the requested fields."""
        request = make_request(fields=["ignored"], parameters={"records": "id:$,label:Item #$"})
        assert build_record(request, 7) == {"id": "7", "label": "Item #7"}

    def test_every_index_token_replaced(self):
        """Test every $ in a value is replaced by the index."""
        request = make_request(parameters={"records": "key:$-$-$"})
        assert build_record(request, 12) == {"key": "12-12-12"}

    def test_escaped_comma_value(self):
        """Test an escaped comma becomes part of the value."""
        request = make_request(parameters={"records": "a:a $,b:b \\, $"})
        record = build_record(request, 3)
        assert list(record) == ["a", "b"]
        assert record["b"] == "b , 3"

    def test_no_fields_and_no_template(self):
        """Test a request without fields or template yields an empty record."""
        assert build_record(make_request(), 1) == {}

    def test_empty_records_parameter(self):
        """Test an empty records parameter yields an empty record."""
        request = make_request(fields=["name"], parameters={"records": ""})
        assert build_record(request, 1) == {}

    def test_duplicate_names_first_wins(self):
        """Test the first declaration of a repeated attribute is kept."""
        request = make_request(parameters={"records": "a:first $,b:x,a:second $"})
        record = build_record(request, 2)
        assert record == {"a": "first 2", "b": "x"}
        assert list(record) == ["a", "b"]

    def test_invalid_entry_raises(self):
        """Test the first invalid entry is reported."""
        request = make_request(parameters={"records": "a:1,oops,b:2"})
        with pytest.raises(InvalidAttributeError) as exc_info:
            build_record(request, 1)

        assert exc_info.value.attribute == "oops"
