from datetime import UTC, datetime, timedelta, timezone
from uuid import uuid4

import pytest
from protean.exceptions import ValidationError
from stockflow.shared.identifiers import validate_identifier
from stockflow.shared.timestamps import as_utc


class TestValidateIdentifier:
    def test_returns_canonical_form(self):
        value = uuid4()
        assert validate_identifier(str(value).upper(), "company_id", "company") == str(value)

    def test_accepts_uuid_instance(self):
        value = uuid4()
        assert validate_identifier(value, "company_id", "company") == str(value)

    @pytest.mark.parametrize("value", ["abc", "", None, 42])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_identifier(value, "company_id", "company")
        assert exc_info.value.messages == {"company_id": ["Invalid company ID format"]}


class TestAsUtc:
    def test_naive_is_treated_as_utc(self):
        naive = datetime(2025, 1, 1, 12, 0)
        assert as_utc(naive) == datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def test_aware_is_converted(self):
        local = datetime(2025, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        converted = as_utc(local)
        assert converted.tzinfo == UTC
        assert converted.hour == 12
