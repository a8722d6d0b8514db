"""Terminal capabilities and styling (unicode, colors, shade glyphs)."""

from __future__ import annotations

import curses
import locale
import os
import sys
from dataclasses import dataclass
from typing import Literal

from .constants import ASCII_FLOOR_SHADES, ASCII_WALL_SHADES


def _pick(seq, level: int, levels: int):
    """Map shade ``level`` (0 darkest) onto ``seq`` ordered darkest first."""
    if levels <= 1:
        return seq[-1]
    idx = int(level / (levels - 1) * (len(seq) - 1))
    return seq[max(0, min(len(seq) - 1, idx))]


@dataclass
class Style:
    unicode_ok: bool
    colors_ok: bool
    color_mode: Literal["none", "basic", "256"]
    wall_pairs: list[int]  # darkest first
    floor_pairs: list[int]
    hud_pair: int
    map_pair: int

    def wall_attr(self, level: int, levels: int) -> int:
        if not self.colors_ok or not self.wall_pairs:
            return curses.A_BOLD if level >= levels // 2 else curses.A_NORMAL
        return curses.color_pair(_pick(self.wall_pairs, level, levels))

    def floor_attr(self, level: int, levels: int) -> int:
        if not self.colors_ok or not self.floor_pairs:
            return curses.A_NORMAL
        return curses.color_pair(_pick(self.floor_pairs, level, levels))

    def wall_char(self, level: int, levels: int) -> str:
        if level <= 0:
            return " "
        if self.colors_ok and self.unicode_ok:
            return "█"
        return _pick(ASCII_WALL_SHADES[::-1], level, levels)

    def floor_char(self, level: int, levels: int) -> str:
        return _pick(ASCII_FLOOR_SHADES[::-1], level, levels)

    def text_attr(self) -> int:
        attr = curses.A_BOLD
        if self.colors_ok and self.hud_pair:
            attr |= curses.color_pair(self.hud_pair)
        return attr


def plain_style() -> Style:
    """Monochrome ASCII style; needs no curses initialization."""
    return Style(
        unicode_ok=False,
        colors_ok=False,
        color_mode="none",
        wall_pairs=[],
        floor_pairs=[],
        hud_pair=0,
        map_pair=0,
    )


def init_style(stdscr) -> Style:
    unicode_ok = prefer_utf8()

    colors_ok = False
    color_mode: Literal["none", "basic", "256"] = "none"
    wall_pairs: list[int] = []
    floor_pairs: list[int] = []
    hud_pair = 0
    map_pair = 0

    if curses.has_colors():
        try:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            colors_ok = True
        except curses.error:
            colors_ok = False

    if colors_ok:
        colors = getattr(curses, "COLORS", 0) or 0
        pairs = getattr(curses, "COLOR_PAIRS", 0) or 0
        color_mode = "256" if colors >= 256 and pairs >= 64 else "basic"

        def safe_init_pair(pid: int, fg: int, bg: int) -> bool:
            try:
                curses.init_pair(pid, fg, bg)
                return True
            except curses.error:
                return False

        pid = 1
        bg = -1

        if color_mode == "256":
            wall_colors = list(range(236, 256))  # grey ramp
            floor_colors = [22, 28, 34, 40, 46]  # green ramp
            hud_fg, map_fg = 15, 250
        else:
            wall_colors = [curses.COLOR_BLUE, curses.COLOR_CYAN, curses.COLOR_WHITE]
            floor_colors = [curses.COLOR_GREEN]
            hud_fg, map_fg = curses.COLOR_WHITE, curses.COLOR_WHITE

        for fg in wall_colors:
            if pid >= pairs:
                break
            if safe_init_pair(pid, fg, bg):
                wall_pairs.append(pid)
                pid += 1
        for fg in floor_colors:
            if pid >= pairs:
                break
            if safe_init_pair(pid, fg, bg):
                floor_pairs.append(pid)
                pid += 1

        if pid < pairs and safe_init_pair(pid, hud_fg, bg):
            hud_pair = pid
            pid += 1
        if pid < pairs and safe_init_pair(pid, map_fg, bg):
            map_pair = pid
            pid += 1

    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        color_mode=color_mode,
        wall_pairs=wall_pairs,
        floor_pairs=floor_pairs,
        hud_pair=hud_pair,
        map_pair=map_pair,
    )


def prefer_utf8() -> bool:
    enc = (
        (sys.stdout.encoding or "")
        + "|"
        + locale.getpreferredencoding(False)
        + "|"
        + (os.environ.get("LC_ALL") or "")
        + "|"
        + (os.environ.get("LANG") or "")
    ).upper()
    return ("UTF-8" in enc) or ("UTF8" in enc)
