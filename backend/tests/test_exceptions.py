from app.core.exceptions import format_validation_errors, summarize_validation_errors


def test_format_validation_errors_joins_location():
    errors = [
        {"loc": ("query", "page"), "msg": "Field required"},
        {"loc": ("body",), "msg": "Field required"},
        {"loc": (), "msg": "Invalid JSON"},
    ]

    assert format_validation_errors(errors) == [
        "query.page: Field required",
        "body: Field required",
        "Invalid JSON",
    ]


def test_summarize_single_error_uses_its_message():
    assert summarize_validation_errors(["path.property_id: too small"]) == "path.property_id: too small"


def test_summarize_many_errors_counts_them():
    assert summarize_validation_errors(["a", "b", "c"]) == "3 errors occurred"
