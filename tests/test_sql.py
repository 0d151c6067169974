"""Unit tests for the partial-update SET clause builder."""

import pytest

from sharebnb.errors import BadRequestError, ValidationError
from sharebnb.sql import USER_COLUMNS, UserField, sql_for_partial_update


class TestSqlForPartialUpdate:

    def test_translates_and_numbers_in_insertion_order(self):
        update = sql_for_partial_update(
            {"firstName": "Aliya", "age": 32},
            {"firstName": "first_name"},
        )

        assert update.fragments == ['"first_name"=$1', '"age"=$2']
        assert update.values == ["Aliya", 32]
        assert update.set_cols == '"first_name"=$1, "age"=$2'

    def test_untranslated_fields_pass_through(self):
        update = sql_for_partial_update({"email": "a@b.com"}, USER_COLUMNS)

        assert update.fragments == ['"email"=$1']
        assert update.values == ["a@b.com"]

    def test_user_fields_use_column_names(self):
        update = sql_for_partial_update(
            {UserField.EMAIL: "new@example.com", UserField.LAST_NAME: "Smith"},
            USER_COLUMNS,
        )

        assert update.set_cols == '"email"=$1, "last_name"=$2'
        assert update.values == ["new@example.com", "Smith"]

    def test_values_are_never_interpolated(self):
        hostile = "x'; DROP TABLE users; --"
        update = sql_for_partial_update({UserField.FIRST_NAME: hostile}, USER_COLUMNS)

        assert hostile not in update.set_cols
        assert update.values == [hostile]

    def test_empty_data_rejected(self):
        with pytest.raises(ValidationError, match="No data"):
            sql_for_partial_update({}, USER_COLUMNS)

    def test_validation_error_is_a_bad_request(self):
        assert issubclass(ValidationError, BadRequestError)
        assert ValidationError.status_code == 400
