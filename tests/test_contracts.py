"""Tests for the two-stage contract machinery."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import BaseModel

from signkit.contracts.base import Contract, RuleContext, normalize_keys, rule
from signkit.contracts.envelope import EnvelopeContract
from signkit.contracts.helpers import age_on, decode_base64, file_extension, split_data_uri
from signkit.models.enums import ErrorKind

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


class RangeParams(BaseModel):
    low: int
    high: int
    label: str | None = None
    active: bool | None = None
    starts_on: date | None = None
    meta: dict | None = None


class RangeContract(Contract):
    schema = RangeParams
    entity = "range"

    def __init__(self):
        self.calls = []

    @rule("low")
    def check_low(self, ctx: RuleContext, low: int) -> None:
        self.calls.append("low")
        if low < 0:
            ctx.failure("low", "must not be negative", ErrorKind.RANGE)

    @rule("low", "high")
    def check_order(self, ctx: RuleContext, low: int, high: int) -> None:
        self.calls.append("order")
        if low > high:
            ctx.failure("high", "must not be below low", ErrorKind.DEPENDENCY)

    @rule("label", allow_missing=True)
    def check_label(self, ctx: RuleContext, label: str | None) -> None:
        self.calls.append("label")


class StrictRangeContract(RangeContract):
    @rule("low")
    def check_low(self, ctx: RuleContext, low: int) -> None:
        if low < 10:
            ctx.failure("low", "must be at least 10", ErrorKind.RANGE)


class TestParamsStage:
    def test_coerces_declared_types(self):
        result = RangeContract().validate({"low": "1", "high": 2, "active": "true"})
        assert result.ok
        assert result.attributes == {"low": 1, "high": 2, "active": True}

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("low", "abc", "must be an integer"),
            ("label", 12, "must be a string"),
            ("active", "maybe", "must be boolean"),
            ("starts_on", "yesterday", "must be a date"),
            ("meta", "text", "must be a hash"),
        ],
    )
    def test_type_messages(self, field, value, message):
        raw = {"low": 1, "high": 2, field: value}
        result = RangeContract().validate(raw)
        assert not result.ok
        assert [(e.field, e.message, e.kind) for e in result.errors] == [
            (field, message, ErrorKind.SCHEMA)
        ]

    def test_missing_and_blank_required(self):
        result = RangeContract().validate({"high": ""})
        assert [(e.field, e.message) for e in result.errors] == [
            ("low", "is missing"),
            ("high", "must be filled"),
        ]

    def test_optional_blank_becomes_none(self):
        result = RangeContract().validate({"low": 1, "high": 2, "label": ""})
        assert result.attributes["label"] is None

    def test_field_names(self):
        assert RangeContract().field_names == ("low", "high", "label", "active", "starts_on", "meta")


class TestRuleStage:
    def test_rules_run_in_definition_order(self):
        contract = RangeContract()
        contract.validate({"low": 1, "high": 2})
        assert contract.calls == ["low", "order", "label"]

    def test_rule_skipped_when_key_failed_params(self):
        contract = RangeContract()
        result = contract.validate({"low": "abc", "high": 2})
        assert contract.calls == ["label"]
        assert len(result.errors) == 1

    def test_rule_skipped_when_key_absent(self):
        contract = RangeContract()
        contract.validate({"low": 1})
        assert "order" not in contract.calls

    def test_allow_missing_runs_with_none(self):
        contract = RangeContract()
        contract.validate({})
        assert contract.calls == ["label"]

    def test_all_rule_failures_collected(self):
        result = RangeContract().validate({"low": -5, "high": -10})
        assert [(e.field, e.kind) for e in result.errors] == [
            ("low", ErrorKind.RANGE),
            ("high", ErrorKind.DEPENDENCY),
        ]

    def test_subclass_overrides_rule(self):
        result = StrictRangeContract().validate({"low": 5, "high": 20})
        assert [e.message for e in result.errors] == ["must be at least 10"]

    def test_call_delegates_to_validate(self):
        assert RangeContract()({"low": 1, "high": 2}).ok


class TestRuleContext:
    def test_supplied(self):
        ctx = RuleContext({"a": 1, "b": None}, {"c"}, NOW)
        assert ctx.supplied("a")
        assert not ctx.supplied("b")
        assert ctx.supplied("c")
        assert not ctx.supplied("d")

    def test_today(self):
        assert RuleContext({}, set(), NOW).today == date(2025, 6, 15)


class TestFixedNow:
    def test_deadline_against_injected_now(self):
        contract = EnvelopeContract()
        inside = {"name": "Lease", "deadline_at": NOW + timedelta(days=90)}
        outside = {"name": "Lease", "deadline_at": NOW + timedelta(days=90, seconds=1)}
        assert contract.validate(inside, now=NOW).ok
        assert [e.message for e in contract.validate(outside, now=NOW).errors] == [
            "maximum 90 days from now"
        ]

    def test_deadline_equal_to_now_is_not_future(self):
        result = EnvelopeContract().validate({"name": "Lease", "deadline_at": NOW}, now=NOW)
        assert [e.message for e in result.errors] == ["must be a future date"]

    def test_iso_string_deadline(self):
        result = EnvelopeContract().validate(
            {"name": "Lease", "deadline_at": "2025-07-01T10:00:00Z"}, now=NOW
        )
        assert result.ok
        assert result.attributes["deadline_at"] == datetime(2025, 7, 1, 10, tzinfo=timezone.utc)

    def test_naive_deadline_taken_as_utc(self):
        result = EnvelopeContract().validate(
            {"name": "Lease", "deadline_at": datetime(2025, 6, 15, 11, 0)}, now=NOW
        )
        assert [e.message for e in result.errors] == ["must be a future date"]

    def test_naive_now_taken_as_utc(self):
        contract = EnvelopeContract()
        naive_now = datetime(2025, 6, 15, 12, 0)
        ahead = {"name": "Lease", "deadline_at": NOW + timedelta(days=1)}
        behind = {"name": "Lease", "deadline_at": NOW - timedelta(minutes=1)}
        assert contract.validate(ahead, now=naive_now).ok
        assert [e.message for e in contract.validate(behind, now=naive_now).errors] == [
            "must be a future date"
        ]


class TestHelpers:
    def test_normalize_keys(self):
        assert normalize_keys(None) == {}
        assert normalize_keys([("a", 1)]) == {}
        assert normalize_keys({1: "x"}) == {"1": "x"}

    @pytest.mark.parametrize(
        "birthday,expected",
        [
            (date(2007, 6, 15), 18),
            (date(2007, 6, 16), 17),
            (date(1905, 6, 14), 120),
            (date(1904, 6, 14), 121),
        ],
    )
    def test_age_on(self, birthday, expected):
        assert age_on(birthday, date(2025, 6, 15)) == expected

    def test_file_extension(self):
        assert file_extension("Report.PDF") == "pdf"
        assert file_extension("archive.tar.gz") == "gz"
        assert file_extension("README") == ""

    def test_split_data_uri(self):
        assert split_data_uri("data:application/pdf;base64,QUJD") == ("application/pdf", "QUJD")
        assert split_data_uri("QUJD") == (None, "QUJD")

    def test_decode_base64_is_strict(self):
        assert decode_base64("QUJD") == b"ABC"
        assert decode_base64("QUJ") is None
        assert decode_base64("QU!D") is None
