"""Colour themes shared by the status bar and the terminal palette."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Theme", "THEMES", "ACTIVE_THEME", "get_theme"]


@dataclass(frozen=True)
class Theme:
    """A named colour scheme: bar colours plus a 16-colour terminal palette."""

    name: str
    bg: str
    bg_alt: str
    fg: str
    fg_dim: str
    border: str
    accent: str
    accent_alt: str
    st_colors: tuple[str, ...]
    st_bg: str
    st_fg: str

    def __post_init__(self) -> None:
        if len(self.st_colors) != 16:
            raise ValueError("a theme needs exactly 16 terminal colours")

    @property
    def status_colors(self) -> tuple[str, str]:
        """Foreground and background colour of the status text."""
        return (self.fg, self.bg)


_GRUVBOX_ST = (
    "#282828", "#cc241d", "#98971a", "#d79921",
    "#458588", "#b16286", "#689d6a", "#a89984",
    "#928374", "#fb4934", "#b8bb26", "#fabd2f",
    "#83a598", "#d3869b", "#8ec07c", "#ebdbb2",
)

_NORD_ST = (
    "#3B4252", "#BF616A", "#A3BE8C", "#EBCB8B",
    "#81A1C1", "#B48EAD", "#88C0D0", "#E5E9F0",
    "#4C566A", "#BF616A", "#A3BE8C", "#EBCB8B",
    "#81A1C1", "#B48EAD", "#8FBCBB", "#ECEFF4",
)

_NORD_DARK_ST = (
    "#1E2330", "#BF616A", "#A3BE8C", "#EBCB8B",
    "#5E81AC", "#B48EAD", "#88C0D0", "#D8DEE9",
    "#2C3240", "#BF616A", "#A3BE8C", "#EBCB8B",
    "#5E81AC", "#B48EAD", "#8FBCBB", "#ECEFF4",
)

THEMES: dict[str, Theme] = {
    "gruvbox": Theme(
        name="gruvbox",
        bg="#282828",
        bg_alt="#3c3836",
        fg="#ebdbb2",
        fg_dim="#d5c4a1",
        border="#504945",
        accent="#d79921",
        accent_alt="#83a598",
        st_colors=_GRUVBOX_ST,
        st_bg=_GRUVBOX_ST[0],
        st_fg=_GRUVBOX_ST[15],
    ),
    "nord": Theme(
        name="nord",
        bg="#2E3440",
        bg_alt="#3B4252",
        fg="#ECEFF4",
        fg_dim="#D8DEE9",
        border="#4C566A",
        accent="#88C0D0",
        accent_alt="#A3BE8C",
        st_colors=_NORD_ST,
        st_bg="#2E3440",
        st_fg="#D8DEE9",
    ),
    "nord_dark": Theme(
        name="nord_dark",
        bg="#1E2330",
        bg_alt="#1E2330",
        fg="#D8DEE9",
        fg_dim="#AEB6C1",
        border="#2C3240",
        accent="#4C566A",
        accent_alt="#5E81AC",
        st_colors=_NORD_DARK_ST,
        st_bg="#1E2330",
        st_fg="#D8DEE9",
    ),
}

ACTIVE_THEME = "nord_dark"


def get_theme(name: str | None = None) -> Theme:
    """Return the theme called ``name``, or the active theme when ``name`` is None."""
    key = ACTIVE_THEME if name is None else name.strip().lower().replace("-", "_")
    try:
        return THEMES[key]
    except KeyError:
        known = ", ".join(sorted(THEMES))
        raise ValueError(f"unknown theme {name!r} (known: {known})") from None