"""Terminal viewer listing anime airing on a selected day."""

import logging
import shutil
import unicodedata
from typing import Optional

import click

from .client import AnitableClient
from .constants import WEEKDAYS, DaySelector
from .errors import AnitableError
from .models import AnimeRecord

logger = logging.getLogger(__name__)

HELP_TEXT = "좌,우: 요일이동 | 상,하: 선택 | r: 새로고침 | q: 종료"
HEADER = ("시각", "제목", "장르")
TIME_WIDTH = 7
GENRE_WIDTH = 15
# help, tabs, blank, table header, status
CHROME_LINES = 5

# click.getchar() escape sequences (POSIX and Windows)
KEY_LEFT = ("\x1b[D", "\xe0K", "\x00K")
KEY_RIGHT = ("\x1b[C", "\xe0M", "\x00M")
KEY_UP = ("\x1b[A", "\xe0H", "\x00H")
KEY_DOWN = ("\x1b[B", "\xe0P", "\x00P")


class ViewerState:
    """Day tab, fetched records and the selection cursor."""

    def __init__(self, client: AnitableClient, day: Optional[DaySelector] = None):
        self.client = client
        self.day = day or DaySelector.today()
        self.items: list[AnimeRecord] = []
        self.selected = 0
        self.should_quit = False
        self.error: Optional[str] = None

    def refresh(self, day: Optional[DaySelector] = None) -> None:
        """Fetch `day` (default: the current one); on failure keep the previous day and list and record the error."""
        day = day or self.day
        try:
            items = self.client.fetch_schedule(day)
        except AnitableError as e:
            logger.warning(f"Failed to refresh {day.name.lower()}: {e}")
            self.error = str(e)
            return

        self.day = day
        self.items = items
        self.selected = 0
        self.error = None

    def next_day(self) -> None:
        self.refresh(self._shift_day(1))

    def prev_day(self) -> None:
        self.refresh(self._shift_day(-1))

    def _shift_day(self, step: int) -> DaySelector:
        if self.day not in WEEKDAYS:
            # Etc/New are not tabs; navigation restarts from Sunday
            return WEEKDAYS[0]
        index = WEEKDAYS.index(self.day)
        return WEEKDAYS[(index + step) % len(WEEKDAYS)]

    def move_up(self) -> None:
        if not self.items:
            return
        self.selected = (self.selected - 1) % len(self.items)

    def move_down(self) -> None:
        if not self.items:
            return
        self.selected = (self.selected + 1) % len(self.items)

    def on_key(self, key: str) -> None:
        if key in ("q", "Q"):
            self.should_quit = True
        elif key in ("r", "R"):
            self.refresh()
        elif key == "l" or key in KEY_RIGHT:
            self.next_day()
        elif key == "h" or key in KEY_LEFT:
            self.prev_day()
        elif key == "k" or key in KEY_UP:
            self.move_up()
        elif key == "j" or key in KEY_DOWN:
            self.move_down()


def display_width(text: str) -> int:
    """Terminal column width; East Asian wide characters take two columns."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def fit(text: str, width: int) -> str:
    """Truncate or pad `text` to exactly `width` columns."""
    result = ""
    used = 0
    for ch in text:
        w = display_width(ch)
        if used + w > width:
            break
        result += ch
        used += w
    return result + " " * (width - used)


def _row(columns: tuple, subject_width: int) -> str:
    time, subject, genre = columns
    return f"{fit(time, TIME_WIDTH)}{fit(subject, subject_width)} {fit(genre, GENRE_WIDTH)}"


def render(state: ViewerState, width: int = 80, height: int = 24) -> str:
    """Render the whole screen as text."""
    subject_width = max(10, width - TIME_WIDTH - GENRE_WIDTH - 1)
    visible = max(1, height - CHROME_LINES)
    offset = max(0, state.selected - visible + 1)

    tabs = []
    for day in WEEKDAYS:
        if day == state.day:
            tabs.append(click.style(f"[{day.label}]", fg="yellow", bold=True))
        else:
            tabs.append(click.style(f" {day.label} ", fg="cyan"))

    lines = [
        HELP_TEXT,
        "".join(tabs) + ("" if state.day.is_weekday else f"  {state.day.label}"),
        "",
        click.style(_row(HEADER, subject_width), underline=True),
    ]

    for index, item in enumerate(state.items[offset:offset + visible], start=offset):
        row = _row((item.display_time, item.subject, item.genre), subject_width)
        if index == state.selected:
            lines.append(click.style(row, fg="yellow", bold=True))
        else:
            lines.append(row)

    if state.error:
        lines.append(click.style(f"오류: {state.error}", fg="red"))
    elif not state.items:
        lines.append("(편성 없음)")

    return "\n".join(lines)


def run(client: AnitableClient, day: Optional[DaySelector] = None) -> None:
    """Interactive loop: redraw, read one key, update state."""
    state = ViewerState(client, day)
    state.refresh()

    while not state.should_quit:
        size = shutil.get_terminal_size()
        click.clear()
        click.echo(render(state, size.columns, size.lines))
        state.on_key(click.getchar())
