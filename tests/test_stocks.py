from infoorbs.stocks import OnvistaStockData, StockData
from infoorbs.utils import format_float


def test_defaults():
    stock = StockData("ACME")
    assert stock.symbol == "ACME"
    assert stock.current_price == 0.0
    assert stock.volume == 0.0
    assert stock.changed is False


def test_setting_new_value_marks_changed():
    stock = StockData("ACME")
    stock.current_price = 12.5
    assert stock.current_price == 12.5
    assert stock.changed is True


def test_setting_same_value_does_not_mark_changed():
    stock = StockData("ACME")
    stock.volume = 100
    stock.changed = False
    stock.volume = 100
    assert stock.changed is False


def test_each_field_tracks_change():
    for field in ("current_price", "volume", "price_change", "percent_change"):
        stock = StockData()
        setattr(stock, field, 3.0)
        assert stock.changed is True
        assert getattr(stock, field) == 3.0


def test_symbol_does_not_mark_changed():
    stock = StockData("ACME")
    stock.symbol = "OTHER"
    assert stock.changed is False


def test_percent_change_is_formatted_in_percent():
    stock = StockData()
    stock.percent_change = 0.05
    assert stock.format_percent_change(2) == "5.00"


def test_formatters_match_format_float():
    stock = StockData()
    stock.current_price = 123.456
    stock.volume = 1000
    stock.price_change = -1.25
    assert stock.format_current_price(2) == format_float(stock.current_price, 2)
    assert stock.format_volume(0) == format_float(stock.volume, 0)
    assert stock.format_price_change(1) == format_float(stock.price_change, 1)


def test_onvista_full_spec():
    stock = OnvistaStockData("ACME@stocks@ISIN:XX0000000000@GAT")
    assert stock.symbol == "ACME"
    assert stock.symbol_type == "stocks"
    assert stock.symbol_id == "ISIN:XX0000000000"
    assert stock.exchange_code == "GAT"


def test_onvista_partial_spec():
    stock = OnvistaStockData("ACME@stocks")
    assert stock.symbol == "ACME"
    assert stock.symbol_type == ""
    assert stock.symbol_id == ""
    assert stock.exchange_code == ""


def test_onvista_three_parts_leaves_id_empty():
    stock = OnvistaStockData("ACME@crypto@XYZ")
    assert stock.symbol_type == "crypto"
    assert stock.symbol_id == ""


def test_onvista_plain_symbol():
    stock = OnvistaStockData("clock")
    assert stock.symbol == "clock"
    assert stock.symbol_id == ""


def test_onvista_tracks_changes():
    stock = OnvistaStockData("ACME@stocks@ID@GAT")
    assert stock.changed is False
    stock.current_price = 5
    assert stock.changed is True