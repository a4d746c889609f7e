# infoorbs

Building blocks for a dashboard spread over a row of five small round
screens. Each widget uses the five screens together: a large clock, the
current weather with a three-day forecast, a network connection screen,
or any layout described by a JSON document served from a URL.

## What is in the package

- `infoorbs.utils` – shared helpers: `get_wrapped_lines` and
  `get_wrapped_line` break text into screen-sized lines,
  `string_to_color` and `string_to_alignment` turn names such as `"red"`
  or `"mc"` into `Color` and `Datum` values, and `format_float` formats
  a number with a fixed count of decimal places.
- `infoorbs.screen` – `Display`, an in-memory drawing surface that
  records every drawing call in its `calls` list, and `ScreenManager`,
  which selects one or all of the five screens through chip-select pins
  written by a function you supply.
- `infoorbs.stocks`, `infoorbs.parqet`, `infoorbs.weather` – data
  models: `StockData` and `OnvistaStockData` (ticker specs of the form
  `NAME@TYPE@ID@EXCHANGE`), `ParqetHolding` and `ParqetPortfolio`
  (holdings kept sorted by current value, largest first), and
  `WeatherData`. Assigning a different value marks a model as `changed`.
- `infoorbs.element`, `infoorbs.shapes`, `infoorbs.text_elements`,
  `infoorbs.figures`, `infoorbs.element_model`, `infoorbs.web_data` –
  the elements a web data document may contain (text, characters, lines,
  rectangles, triangles, circles, arcs, images), `ElementType`,
  `WebDataElementModel`, and `WebDataModel`, which holds one screen's
  label and either plain text or a list of elements.
- `infoorbs.widget` – the `Widget` and `ScreenWidget` base classes, and
  `WidgetSet`, which holds up to five widgets and moves between them with
  `next` and `prev`.
- `infoorbs.button` – `Button`, a debounced push button read through a
  function that returns the pin level.
- `infoorbs.global_time` – `GlobalTime`, broken-down local time
  refreshed at most once a second, and `fetch_timezone_offset`, which
  asks a time zone web API for the GMT offset.
- Widgets: `ClockWidget` (`infoorbs.clock_widget`), `WeatherWidget`
  (`infoorbs.weather_widget`), `WebDataWidget`
  (`infoorbs.web_data_widget`) and `WifiWidget`
  (`infoorbs.wifi_widget`).

## Using the pieces

The models and helpers work on their own:

```python
from infoorbs.utils import format_float, string_to_color
from infoorbs.stocks import OnvistaStockData
from infoorbs.parqet import ParqetHolding, ParqetPortfolio

format_float(3.14159, 2)       # "3.14"
string_to_color("Dark Green")  # Color.DARKGREEN

stock = OnvistaStockData("BASF@stocks@ISIN:EXAMPLE0001@GAT")
stock.symbol_type              # "stocks"
stock.current_price = 42.5
stock.format_current_price(2)  # "42.50"

portfolio = ParqetPortfolio("portfolio-1")
portfolio.set_holdings([
    ParqetHolding(name="Small", current_value=10.0),
    ParqetHolding(name="Large", current_value=99.0),
])
portfolio[0].name              # "Large"
```

Widgets draw through a `ScreenManager`:

```python
from infoorbs.screen import Display, ScreenManager
from infoorbs.web_data_widget import WebDataWidget

levels = {}
display = Display()
manager = ScreenManager(display, levels.__setitem__, [1, 2, 3, 4, 5])

widget = WebDataWidget(manager, "http://localhost:8000/screens.json")
widget.update(force=True)
widget.draw(force=True)
print(display.calls[-1])
```

A web data document gives a refresh `interval` in milliseconds and one
entry per screen under `"displays"` (a bare list of entries is accepted
too). Each entry has a `label`, colours, and either a plain `data`
string or a list of drawing elements:

```json
{
  "interval": 5000,
  "displays": [
    {"label": "Inbox", "data": "12 unread", "color": "white", "background": "navy"},
    {
      "label": "Load",
      "data": [
        {"type": "arc", "x": 120, "y": 120, "radius": 100,
         "innerRadius": 90, "angleStart": 0, "angleEnd": 200, "color": "green"},
        {"type": "text", "x": 120, "y": 120, "text": "55%", "alignment": "mc", "size": 3}
      ]
    }
  ]
}
```

Services that need credentials take them as constructor arguments, for
example `WeatherWidget(manager, location="Berlin", api_key="placeholder")`.

## What the package does not do

- It has no command and no main loop. You create the `ScreenManager`,
  the widgets, a `WidgetSet` and the buttons yourself, and call their
  `update` and `draw` methods from your own loop.
- `Display` does not drive real panels; it records the drawing calls so
  that another layer can render them.
- There is no portfolio widget and no stock ticker widget: the
  `ParqetPortfolio`, `StockData` and `OnvistaStockData` models are
  provided, but nothing here fetches their data or draws them.