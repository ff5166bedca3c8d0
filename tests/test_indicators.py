import math

import pytest

from portfolio_ga.asset import Asset
from portfolio_ga.indicators import (
    calculate_indicators,
    format_price_table,
    parse_price_table,
    read_price_table,
)


@pytest.fixture
def table():
    return [
        ["IDX", "AAA", "BBB"],
        ["100", "10", "50"],
        ["101", "11", "49"],
        ["103", "10.5", "52"],
        ["102", "12", "51"],
        ["104", "12.5", "53"],
    ]


def test_parse_price_table_splits_commas():
    rows = parse_price_table(["a,b,c\n", "1,2,3\n"])
    assert rows == [["a", "b", "c"], ["1", "2", "3"]]


def test_parse_price_table_trailing_comma_and_empty_line():
    rows = parse_price_table(["a,b,\r\n", "\n", "x,,y\n"])
    assert rows == [["a", "b"], [], ["x", "", "y"]]


def test_read_price_table(tmp_path):
    path = tmp_path / "Data.csv"
    path.write_text("IDX,AAA\n100,10\n101,11\n", encoding="utf-8")
    assert read_price_table(path) == [["IDX", "AAA"], ["100", "10"], ["101", "11"]]


def test_read_price_table_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_price_table(tmp_path / "absent.csv")


def test_format_price_table():
    assert format_price_table([["a", "b"], ["1"]]) == "a b \n1 \n"


def test_format_parse_round_trip(table):
    text = format_price_table(table)
    lines = [line.rstrip(" ").replace(" ", ",") for line in text.splitlines()]
    assert parse_price_table(lines) == table


def test_one_asset_per_non_benchmark_column(table):
    assets = calculate_indicators(table, 0.01)
    assert [a.name for a in assets] == ["AAA", "BBB"]
    assert all(isinstance(a, Asset) for a in assets)


def test_constant_prices_have_no_return_or_volatility():
    table = [["IDX", "FLAT"], ["100", "5"], ["101", "5"], ["102", "5"]]
    (asset,) = calculate_indicators(table, 0.0)
    assert asset.ret == 0.0
    assert asset.volatility == 0.0
    assert math.isnan(asset.sharpe_ratio)


def test_rising_prices_give_positive_return(table):
    aaa, _ = calculate_indicators(table, 0.0)
    assert aaa.ret > 0
    assert aaa.volatility > 0


def test_scaling_prices_keeps_return_and_scales_volatility(table):
    scaled = [table[0]] + [
        [row[0], str(float(row[1]) * 3), row[2]] for row in table[1:]
    ]
    original = calculate_indicators(table, 0.01)[0]
    tripled = calculate_indicators(scaled, 0.01)[0]
    assert tripled.ret == pytest.approx(original.ret)
    assert tripled.volatility == pytest.approx(original.volatility * 3)


def test_sharpe_ratio_relates_return_and_volatility(table):
    risk_free = 0.02
    for asset in calculate_indicators(table, risk_free):
        assert asset.sharpe_ratio * asset.volatility == pytest.approx(
            asset.ret - risk_free * 100
        )


def test_higher_risk_free_lowers_sharpe(table):
    low = calculate_indicators(table, 0.0)
    high = calculate_indicators(table, 0.05)
    for a, b in zip(low, high):
        assert b.sharpe_ratio < a.sharpe_ratio
        assert b.beta == a.beta


def test_first_price_row_is_only_a_base(table):
    changed = [table[0], ["999", "10", "50"], *table[2:]]
    base = calculate_indicators(table, 0.01)
    other = calculate_indicators(changed, 0.01)
    assert [a.volatility for a in other] == pytest.approx([a.volatility for a in base])


def test_too_few_rows():
    with pytest.raises(ValueError):
        calculate_indicators([["IDX", "AAA"], ["1", "2"]], 0.01)


def test_non_numeric_price():
    with pytest.raises(ValueError):
        calculate_indicators([["IDX", "AAA"], ["1", "2"], ["1", "x"], ["1", "3"]], 0.0)


def test_short_row():
    with pytest.raises(ValueError):
        calculate_indicators([["IDX", "AAA"], ["1", "2"], ["1"], ["1", "3"]], 0.0)


def test_non_positive_price():
    with pytest.raises(ValueError):
        calculate_indicators([["IDX", "AAA"], ["1", "2"], ["1", "0"], ["1", "3"]], 0.0)