import pytest

from thrift_sql.naming import to_upper_snake


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("orderId", "ORDER_ID"),
        ("userName", "USER_NAME"),
        ("age", "AGE"),
        ("address2Line", "ADDRESS2_LINE"),
        ("aBC", "A_B_C"),
        ("ORDER_ID", "ORDER_ID"),
        ("user_name", "USER_NAME"),
        ("Name", "NAME"),
    ],
)
def test_to_upper_snake(name: str, expected: str):
    assert to_upper_snake(name) == expected


def test_to_upper_snake_is_idempotent_on_its_output():
    column = to_upper_snake("createdAtMillis")

    assert column == "CREATED_AT_MILLIS"
    assert to_upper_snake(column) == column
