from core.utils import NOT_A_NUMBER, format_currency, format_months, format_percent


def test_format_currency_brazilian_grouping():
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(1234.56) == "R$ 1.234,56"
    assert format_currency(50_000_000) == "R$ 50.000.000,00"


def test_format_currency_negative_and_missing():
    assert format_currency(-1234.5) == "-R$ 1.234,50"
    assert format_currency(None) == "R$ 0,00"


def test_non_finite_values_are_not_shown_as_zero():
    for bad in (float("nan"), float("inf"), float("-inf")):
        assert format_currency(bad) == NOT_A_NUMBER
        assert format_percent(bad) == NOT_A_NUMBER
        assert format_months(bad) == NOT_A_NUMBER


def test_format_percent_five_digits():
    assert format_percent(2.5) == "2,50000%"
    assert format_percent(0) == "0,00000%"
    assert format_percent(1234.123456) == "1.234,12346%"


def test_format_months():
    assert format_months(60) == "60"
    assert format_months(60.5) == "60,5"
    assert format_months(0) == "0"
