"""Terminal drawing helpers: colours, cursor movement, boxes and dialogue."""

import sys
import time
from typing import Optional, TextIO

from .enums import RESET

BUFFER_WIDTH = 120
BUFFER_HEIGHT = 50
CLEAR_CELLS = 60 * 16

TITLE = (
    "888888ba                                                  .d88888b  dP                                     ",
    "88    `8b                                                 88.    '  88                                      ",
    "88     88 88d888b..d8888b.  .d8888b..d8888b. 88d888b.    `Y88888b.  88.d8888b.  dP    dP. d8888b. 88d888b. ",
    "88     88 88'  `88 88'  `88 88'  `88 88'  `88 88'  `88          `8b 88 88'  `88 88    88 88ooood8 88'  `88 ",
    "88    .8P 88       88.  .88 88.  .88 88.  .88 88    88    d8'   .8P 88 88.  .88 88.  .88 88.  ... 88       ",
    "8888888P  dP       `88888P8 `8888P88 `88888P' dP    dP     Y88888P  dP `88888P8 `8888P88 `88888P' dP       ",
    "ooooooooooooooooooooooooooooo~~~~.88~oooooooooooooooooooooooooooooooooooooooooooo~~~~.88~oooooooooooooooooo",
    "                             d8888P                                              d8888P                   ",
)

VS_ART = (
    "#   #   ### ",
    "#   #  #    ",
    "#  #   #    ",
    "#  #    #   ",
    "# #      #  ",
    "#     ###   ",
)

SPARTA_ART = (
    "⠀⠀⠀⠀⠀⠀⠀⠀⣶⢲⣶⠀⠀⠀⠀⠀⠀⠀⠀⠀",
    "⠀⠀⠀⠀⠀⠀⠀⠀⣿⣷⣻⠀⠀⠀⠀⠀⠀⠀⠀⠀",
    "⠀⡀⠄⠀⠠⠐⣠⡷⣾⢾⣷⡶⣦⡀⠂⠀⠂⠀⠐⠀",
    "⠀⠀⠀⣔⠙⢺⣽⡽⣽⢯⣷⣻⡷⣷⡆⠀⠀⠀⢀⠀",
    "⠀⠠⢸⣄⢀⣑⣿⢙⠯⣟⡾⠳⡛⣿⡆⠀⠀⠈⠀⠀",
    "⢀⠀⠀⢩⠪⣿⣽⣦⡃⢛⠃⣫⣺⣽⡆⠀⠀⢀⠀⠀",
    "⠀⠀⠀⣖⠛⢫⢿⢾⢇⢄⢢⢽⢟⠓⡲⠒⣄⠀⠀⠀",
    "⠂⠀⠀⣗⡈⢔⢐⠅⠃⡃⡋⡯⡀⠂⠄⡑⡐⡇⠀⠀",
    "⡀⠄⠀⢩⢫⡿⣿⡨⣊⣐⢄⣯⠂⢅⠪⠐⢌⠇⠀⠀",
    "⠀⠀⠀⢨⢢⡿⡿⠊⡓⣿⡟⡚⠻⣶⢷⡗⠁⠀⠀⠀",
)

_SETTING_KEYS = {0: "PlayerStatus", 1: "VS", 2: "MonsterStatus", 3: "Sparta"}


def colored_text(text: str, color_code: str) -> str:
    """Wrap ``text`` in ``color_code`` followed by the reset sequence."""
    return f"{color_code}{text}{RESET}"


def _ansi_index(nibble: int) -> int:
    # Console attributes order the bits blue/green/red; ANSI orders them red/green/blue.
    return (1 if nibble & 4 else 0) | (2 if nibble & 2 else 0) | (4 if nibble & 1 else 0)


def _attribute_to_ansi(attribute: int) -> str:
    attribute = int(attribute) & 0xFF
    fg, bg = attribute & 0x0F, attribute >> 4
    fg_code = (90 if fg & 8 else 30) + _ansi_index(fg)
    bg_code = (100 if bg & 8 else 40) + _ansi_index(bg)
    return f"\033[{fg_code};{bg_code}m"


class ColorPrinter:
    """Produces coloured text and switches the terminal's current colour."""

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def set_text_color(self, color_num: int) -> None:
        """Set the terminal colour from a console attribute value (0-255)."""
        self.out.write(_attribute_to_ansi(color_num))
        self.out.flush()

    def colored_text(self, text: str, color_code: str) -> str:
        return colored_text(text, color_code)


class ConsoleManager:
    """Cursor-addressed drawing on a 120x50 terminal."""

    def __init__(self, out: Optional[TextIO] = None, delay_scale: float = 1.0):
        self._out = out
        self.delay_scale = delay_scale
        self.printer = ColorPrinter(out)
        self.cursor_positions = {
            "PlayerStatus": (2, 20),
            "VS": (35, 20),
            "MonsterStatus": (50, 20),
            "Sparta": (80, 18),
        }

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text at the current cursor position."""
        self.out.write(text)

    def sleep(self, milliseconds: int) -> None:
        """Pause for ``milliseconds`` scaled by ``delay_scale``."""
        self.out.flush()
        seconds = milliseconds / 1000 * self.delay_scale
        if seconds > 0:
            time.sleep(seconds)

    def set_cursor_position(self, x: int, y: int) -> None:
        self.out.write(f"\033[{max(y, 0) + 1};{max(x, 0) + 1}H")

    def _fill(self, x: int, y: int, length: int) -> None:
        while length > 0:
            run = min(length, BUFFER_WIDTH - x)
            self.set_cursor_position(x, y)
            self.out.write(" " * run)
            length -= run
            x, y = 0, y + 1

    def clear_screen(self) -> None:
        """Blank the top of the buffer and home the cursor."""
        self.set_cursor_position(0, 0)
        self._fill(0, 0, CLEAR_CELLS)
        self.set_cursor_position(0, 0)
        self.sleep(500)

    def clear_console_size_screen(self) -> None:
        """Clear the whole terminal and home the cursor."""
        self.set_cursor_position(0, 0)
        self.out.write("\033[2J")
        self.set_cursor_position(0, 0)
        self.sleep(500)

    def clear_player_status(self) -> None:
        for y in range(21, 24):
            self._fill(2, y, 26)

    def clear_monster_status(self) -> None:
        for y in range(22, 24):
            self._fill(50, y, 19)

    def display_main_menu(self) -> None:
        x, y = 5, 5
        self.set_cursor_position(x, y)
        for offset, line in enumerate(TITLE):
            self.set_cursor_position(x, y + offset)
            self.out.write(self.printer.colored_text(line, str(offset + 1)) + "\n")
        self.out.write("\n\n")
        self.set_cursor_position(50, 20)
        self.out.write("> 게임 시작 : 1")
        self.set_cursor_position(50, 22)
        self.out.write("> 게임 종료 : 2")
        self.set_cursor_position(50, 24)

    def draw_rectangle(self, x: int, y: int, width: int, height: int) -> None:
        self.set_cursor_position(x, y)
        self.out.write("-" * width)
        for row in range(y + 1, y + height - 1):
            self.set_cursor_position(x, row)
            self.out.write("|")
            self.set_cursor_position(x + width - 1, row)
            self.out.write("|")
        self.set_cursor_position(x, y + height - 1)
        self.out.write("-" * width)

    def draw_vs(self) -> None:
        for row, line in enumerate(VS_ART):
            self.set_setting_position(1, row)
            self.out.write(line)

    def draw_sparta(self) -> None:
        for row, line in enumerate(SPARTA_ART):
            self.set_setting_position(3, row)
            self.out.write(line)

    def set_setting_position(self, num: int, y: int, x: int = 0) -> None:
        """Move the cursor relative to one of the named battle panels."""
        key = _SETTING_KEYS.get(num)
        if key is None:
            return
        base_x, base_y = self.cursor_positions[key]
        self.set_cursor_position(base_x + x, base_y + y)

    def display_dialogue(
        self,
        dialogue: str,
        start_x: int,
        start_y: int,
        width: int,
        height: int,
        offset_x: int,
        offset_y: int,
    ) -> None:
        """Print a multi-line string inside a bordered box."""
        x = start_x + 1 + offset_x
        y = start_y + 1 + offset_y
        for row, line in enumerate(dialogue.split("\n")):
            self.set_cursor_position(x, y + row)
            self.out.write(line)
        self.draw_rectangle(start_x, start_y, width, height + 2 * offset_y)
        self.set_cursor_position(0, 0)