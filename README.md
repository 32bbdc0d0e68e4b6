# barstatus

barstatus builds a one-line status text from small components: battery,
CPU, memory, disk, network, Wi-Fi, volume, temperature, date and time, and
more. It refreshes the line at a fixed interval. The line goes either to
standard output or to the name of the X root window, which bars such as
dwm show as their status text.

It is written for Linux. Most components read `/proc` and `/sys`.

## Installation

```
pip install .
```

This needs Python 3.10 or later and installs `psutil`.

## Usage

```
barstatus        # set the X root window name every interval (needs DISPLAY and xsetroot)
barstatus -s     # print the status line to standard output every interval
barstatus -1     # print the status line once to standard output and exit
barstatus -v     # print "barstatus-1.1" to standard error and exit with status 1
```

Flags may be grouped (`-s1`), and `--` ends the flags. Any other flag, or
any argument that is not a flag, prints the usage line and exits with
status 1.

Without `-s`, the line is handed to the `xsetroot -name` command. If
`DISPLAY` is not set, or `xsetroot` fails, the program stops with an
error. When it exits, it clears the root window name.

`SIGINT` and `SIGTERM` stop the loop after the current round. `SIGUSR1`
cuts the wait short, so the line is refreshed straight away.

The command always uses `personal_config()` (see below): battery `BAT0`,
Wi-Fi `wlp58s0`, disk `/`, CPU, RAM, volume through `pactl`, and the date
and time. It refreshes once a second and shows `--` for values it cannot
read.

## Components

Each component takes one argument (a path, an interface name, a format
string, or nothing) and returns a string. If it cannot produce a value, it
raises `barstatus.util.ComponentError`. `build_status` writes the error to
standard error and puts the configured unknown text in its place.

| Component | Argument | Module |
|---|---|---|
| `battery_perc`, `battery_state`, `battery_remaining` | battery name (`BAT0`) | `barstatus.components.battery` |
| `cat`, `num_files`, `run_command` | file path, directory path, shell command | `barstatus.components.files` |
| `cpu_freq`, `cpu_perc` | none | `barstatus.components.cpu` |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | mount point (`/`) | `barstatus.components.disk` |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | none | `barstatus.components.memory` |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | none | `barstatus.components.memory` |
| `ipv4`, `ipv6`, `up`, `netspeed_rx`, `netspeed_tx` | interface name (`eth0`) | `barstatus.components.network` |
| `wifi_essid`, `wifi_perc` | interface name (`wlan0`) | `barstatus.components.wifi` |
| `vol_perc` | OSS mixer device (`/dev/mixer`) | `barstatus.components.volume` |
| `temp` | sensor file in millidegrees (`/sys/class/thermal/...`) | `barstatus.components.temperature` |
| `datetime` | strftime format (`%F %T`) | `barstatus.components.system` |
| `hostname`, `kernel_release`, `load_avg`, `uptime`, `entropy` | none | `barstatus.components.system` |
| `gid`, `uid`, `username` | none | `barstatus.components.system` |

Some notes on how components behave:

- Sizes are scaled with `barstatus.util.fmt_human(num, base)`, for example
  `"1.5 Gi"` for base 1024 or `"2.4 G"` for base 1000.
- `battery_state` returns `+` (charging), `-` (discharging), `o` (full or
  not charging) or `?`. `battery_remaining` returns `"Hh Mm"` while
  discharging and an empty string otherwise.
- `cpu_perc`, `netspeed_rx` and `netspeed_tx` compare against the previous
  call, so their first call only records a sample and raises
  `ComponentError`. The classes behind them, `CpuUsage(stat_path)` and
  `NetSpeed(direction, interval_ms)`, can be used on their own.
- `wifi_essid` and `wifi_perc` ask the kernel's nl80211 interface over a
  generic netlink socket. `rssi_to_perc` maps dBm to a percentage.
- `entropy` returns `∞` on OpenBSD and FreeBSD.

## Configuration from Python

A `Config` holds the entries, the update interval in milliseconds, the
unknown text, the maximum line length in bytes, and optional colours. Each
`Arg` entry holds a component function, a format string and an argument.
The format understands `%s` for the value and `%%` for a literal percent
sign. Any other conversion raises `ValueError`.

```python
from barstatus.config import Arg, Config, component, default_config, personal_config
from barstatus.status import build_status

print(build_status(default_config()))     # date and time only
print(build_status(personal_config()))

mine = Config(
    args=(
        Arg(component("load_avg"), "load %s | "),
        Arg(component("datetime"), "%s", "%H:%M"),
    ),
    interval=2000,
    unknown_str="n/a",
)
print(build_status(mine))
```

`build_status` stops adding entries once the line would reach `maxlen`
bytes, and warns that the output was truncated. `component(name)` looks up
a component by name and raises `ValueError` for unknown names.

Colour themes (`gruvbox`, `nord`, `nord_dark`) come from
`barstatus.themes.get_theme(name)`. With no name it returns the active
theme, `nord_dark`. Each theme carries bar colours, a 16-colour terminal
palette, and `status_colors` (foreground, background). `personal_config()`
stores the active theme's `status_colors` in `Config.colors`.

## What it does not do

- The `barstatus` command has no configuration file and no option to
  choose another configuration. To show something else, build a `Config`
  in Python and call `build_status`.
- It does not talk to the X server itself. Setting the root window name
  depends on the external `xsetroot` program, and `Config.colors` is not
  applied to anything.
- There are no keyboard indicator or keyboard layout components.
- Battery, CPU frequency, memory, swap, network speed and temperature read
  Linux `/proc` and `/sys` files only. Volume reads an OSS mixer device
  only.

## Tests

```
pip install .[test]
pytest
```