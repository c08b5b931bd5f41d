# statusbar

`statusbar` is an asyncio toolkit for building a window-manager status
line: segment values that render themselves with `str()`, readers and
periodic update streams for system state, a scrolling text ticker, a
toggleable clock, a function that merges any number of update streams into
one `|`-separated line, and a small HTTP API to control the clock and feed
the ticker. It also ships two commands, `aiserver` and `ask`, which send an
answer from a local Ollama model into the ticker.

## Installation

```sh
pip install .
```

Linux is assumed: battery and brightness are read from
`/sys/class/power_supply/BAT0` and `/sys/class/backlight/amdgpu_bl1/brightness`,
and the power-supply listener uses a netlink socket.

## Modules

- `statusbar.models` – segment values. `Battery` (⚡ when charging, 🪫 below
  50, otherwise 🔋), `Brightness` (🔆), `Disk` (💾), `IFace` (📡), `Volume`
  (🎵), `Wttr` (the weather text as is), `Clock` (🕒), `Calendar`, `WeekNo`,
  `Day` (📅) and `Text` (👽 … ◀). `Watchface` lists the clock faces
  `CLOCK`, `DATE`, `WEEKNUMBER`, `DAY`; `Watchface.next()` cycles through them.
- `statusbar.sources` – `read_battery`, `read_brightness` (scaled from 0–255
  to percent), `read_disk` (used share of a filesystem), `find_interface`
  (first interface with a global unicast address) and `fetch_weather`
  (wttr.in temperature for Copenhagen by default). They raise `SourceError`
  when the state cannot be read. `poll(getter, interval, retry_interval)`
  turns a reader into an async stream of strings, logging failures and
  retrying. Ready-made streams: `battery_updates()` (every 10 minutes),
  `brightness_updates()` (every 2 seconds), `disk_updates()` (every minute),
  `net_updates()` (whenever the address changes, checked every 5 seconds)
  and `weather_updates()` (every 10 minutes, retried every minute).
- `statusbar.clock` – `Watch` yields the current face every 5 seconds;
  `await watch.toggle()` moves to the next face. `render_face(face, when)`
  renders one face for a given `datetime`.
- `statusbar.text` – `TextScroller(window_width, delay)` scrolls bytes
  written with `await scroller.write(data)` through a fixed-width window, one
  step per `delay` seconds (0.5 by default). `toggle()` shows or hides it;
  while hidden, `updates()` yields empty strings. Both raise `TextTimeout`
  if the scroller does not accept input within 5 seconds.
- `statusbar.ui` – `combine(sources)` yields the joined line each time any
  stream produces a value; `run(bar, sources)` calls `bar.update(line)` for
  every combined line.
- `statusbar.api` – `Api(watch, text)` serves `/time` (toggle the clock face),
  `/text` (show or hide the ticker) and `/stream` (a WebSocket whose text and
  binary messages are written into the ticker). `Api.app()` returns the
  aiohttp application; `await Api.run(host, port)` serves it, on port 4545
  by default.
- `statusbar.inotify` – `listen(path)` yields a description each time the
  file at `path` is modified.
- `statusbar.uevent` – `listen()` yields `True`/`False` whenever the kernel
  reports mains power going online or offline; `parse_field` and
  `power_supply_states` parse the `KEY=VALUE` records.

## Putting a status line together

```python
import asyncio

from statusbar import api, clock, sources, text, ui


class PrintBar:
    def update(self, line):
        print(line, flush=True)


async def main():
    watch = clock.Watch()
    ticker = text.TextScroller(80, 0.15)
    server = asyncio.create_task(api.Api(watch, ticker).run())
    await ui.run(
        PrintBar(),
        [
            sources.net_updates(),
            sources.disk_updates(),
            sources.brightness_updates(),
            sources.battery_updates(),
            watch.updates(),
            sources.weather_updates(),
            ticker.updates(),
        ],
    )


asyncio.run(main())
```

With this running, `curl -s localhost:4545/time` cycles the clock and
`curl -s localhost:4545/text` shows or hides the ticker.

## Asking an AI and watching the answer scroll by

`aiserver` serves `/ask` on port 4343. It takes the `question` form (or
query) value, answers 406 `missing question` if there is none, connects to
the ticker's WebSocket and streams the model's answer into it chunk by
chunk; any failure is answered with 500.

```sh
aiserver [--model mistral] [--port 4343] \
         [--ollama-url http://localhost:11434] \
         [--stream-url ws://localhost:4545/stream]
```

Then, from any terminal:

```sh
ask "what is 2 + 2?"
```

`ask` posts the first argument as the question (to
`http://localhost:4343/ask`, or `--url`) and prints the HTTP status line and
the response body. Turn the ticker on (`/text`) to see the answer scroll by.

## What the package does not do

The package does not write the status line to an X display, and it has no
command that starts the whole bar. To show the line you pass `statusbar.ui.run`
an object with an `update(line)` method of your own, as in the example above,
and start the `Api` yourself. There is also no stream that reads the audio
volume; `Volume` only renders a value you supply.

## Development

```sh
pip install -e ".[test]"
pytest
```