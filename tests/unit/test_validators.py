"""
Unit tests for request parsing helpers.
"""
import pytest
from datetime import date

from workload_app.error_handlers.exceptions import ValidationException
from workload_app.utils.validators import (
    parse_id_list,
    sanitize_request_data,
    validate_date_param,
    validate_optional_date_param,
    validate_required_fields,
)


class TestDateParams:

    @pytest.mark.unit
    def test_valid_date(self):
        assert validate_date_param('2024-02-29') == date(2024, 2, 29)

    @pytest.mark.unit
    @pytest.mark.parametrize('value', ['2023-02-29', '29.02.2024', 'today', None, 20240229])
    def test_invalid_date(self, value):
        with pytest.raises(ValidationException):
            validate_date_param(value, 'startDate')

    @pytest.mark.unit
    def test_optional_date(self):
        assert validate_optional_date_param(None) is None
        assert validate_optional_date_param('') is None
        assert validate_optional_date_param('2024-01-08') == date(2024, 1, 8)


class TestRequiredFields:

    @pytest.mark.unit
    def test_blank_values_count_as_missing(self):
        with pytest.raises(ValidationException) as exc_info:
            validate_required_fields({'title': '', 'type': 'sick'}, ['title', 'type', 'startDate'])
        assert exc_info.value.details == {'missing': ['title', 'startDate']}

    @pytest.mark.unit
    def test_all_present(self):
        validate_required_fields({'title': 'x'}, ['title'])


class TestParseIdList:

    @pytest.mark.unit
    def test_absent_parameter(self):
        assert parse_id_list(None) is None

    @pytest.mark.unit
    def test_splits_and_strips(self):
        assert parse_id_list(' u1 , u2') == ['u1', 'u2']

    @pytest.mark.unit
    def test_keeps_empty_entries(self):
        assert parse_id_list('u1,,u2') == ['u1', '', 'u2']
        assert parse_id_list('') == ['']


class TestSanitizeRequestData:

    @pytest.mark.unit
    def test_redacts_secrets(self):
        cleaned = sanitize_request_data('{"userId": "u1", "Token": "abc", "password": "pw"}')
        assert '"userId": "u1"' in cleaned
        assert 'abc' not in cleaned
        assert 'pw"' not in cleaned
        assert cleaned.count('[REDACTED]') == 2
