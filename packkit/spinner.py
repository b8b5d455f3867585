"""A terminal spinner that shows progress while work is under way."""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, Dict, Iterable, List, Optional, TextIO, Union

_CLOCK_ONE_OCLOCK = 0x1F550
_CLOCK_ONE_THIRTY = 0x1F55C

CHAR_SETS: Dict[int, List[str]] = {
    0: ["←", "↖", "↑", "↗", "→", "↘", "↓", "↙"],
    1: ["▁", "▃", "▄", "▅", "▆", "▇", "█", "▇", "▆", "▅", "▄", "▃", "▁"],
    2: ["▖", "▘", "▝", "▗"],
    3: ["┤", "┘", "┴", "└", "├", "┌", "┬", "┐"],
    4: ["◢", "◣", "◤", "◥"],
    5: ["◰", "◳", "◲", "◱"],
    6: ["◴", "◷", "◶", "◵"],
    7: ["◐", "◓", "◑", "◒"],
    8: [".", "o", "O", "@", "*"],
    9: ["|", "/", "-", "\\"],
    10: ["◡◡", "⊙⊙", "◠◠"],
    11: ["⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"],
    12: [">))'>", " >))'>", "  >))'>", "   >))'>", "    >))'>", "   <'((<", "  <'((<", " <'((<"],
    13: ["⠁", "⠂", "⠄", "⡀", "⢀", "⠠", "⠐", "⠈"],
    14: ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"],
    15: list("abcdefghijklmnopqrstuvwxyz"),
    16: ["▉", "▊", "▋", "▌", "▍", "▎", "▏", "▎", "▍", "▌", "▋", "▊", "▉"],
    17: ["■", "□", "▪", "▫"],
    18: ["←", "↑", "→", "↓"],
    19: ["╫", "╪"],
    20: ["⇐", "⇖", "⇑", "⇗", "⇒", "⇘", "⇓", "⇙"],
    21: ["⠁", "⠁", "⠉", "⠙", "⠚", "⠒", "⠂", "⠂", "⠒", "⠲", "⠴", "⠤", "⠄", "⠄", "⠤", "⠠", "⠠", "⠤", "⠦", "⠖", "⠒", "⠐", "⠐", "⠒", "⠓", "⠋", "⠉", "⠈", "⠈"],
    22: ["⠈", "⠉", "⠋", "⠓", "⠒", "⠐", "⠐", "⠒", "⠖", "⠦", "⠤", "⠠", "⠠", "⠤", "⠦", "⠖", "⠒", "⠐", "⠐", "⠒", "⠓", "⠋", "⠉", "⠈"],
    23: ["⠁", "⠉", "⠙", "⠚", "⠒", "⠂", "⠂", "⠒", "⠲", "⠴", "⠤", "⠄", "⠄", "⠤", "⠴", "⠲", "⠒", "⠂", "⠂", "⠒", "⠚", "⠙", "⠉", "⠁"],
    24: ["⠋", "⠙", "⠚", "⠒", "⠂", "⠂", "⠒", "⠲", "⠴", "⠦", "⠖", "⠒", "⠐", "⠐", "⠒", "⠓", "⠋"],
    25: ["ｦ", "ｧ", "ｨ", "ｩ", "ｪ", "ｫ", "ｬ", "ｭ", "ｮ", "ｯ", "ｱ", "ｲ", "ｳ", "ｴ", "ｵ", "ｶ", "ｷ", "ｸ", "ｹ", "ｺ", "ｻ", "ｼ", "ｽ", "ｾ", "ｿ", "ﾀ", "ﾁ", "ﾂ", "ﾃ", "ﾄ", "ﾅ", "ﾆ", "ﾇ", "ﾈ", "ﾉ", "ﾊ", "ﾋ", "ﾌ", "ﾍ", "ﾎ", "ﾏ", "ﾐ", "ﾑ", "ﾒ", "ﾓ", "ﾔ", "ﾕ", "ﾖ", "ﾗ", "ﾘ", "ﾙ", "ﾚ", "ﾛ", "ﾜ", "ﾝ"],
    26: [".", "..", "..."],
    27: ["▁", "▂", "▃", "▄", "▅", "▆", "▇", "█", "▉", "▊", "▋", "▌", "▍", "▎", "▏", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█", "▇", "▆", "▅", "▄", "▃", "▂", "▁"],
    28: [".", "o", "O", "°", "O", "o", "."],
    29: ["+", "x"],
    30: ["v", "<", "^", ">"],
    31: [">>--->", " >>--->", "  >>--->", "   >>--->", "    >>--->", "    <---<<", "   <---<<", "  <---<<", " <---<<", "<---<<"],
    32: ["|", "||", "|||", "||||", "|||||", "|||||||", "||||||||", "|||||||", "||||||", "|||||", "||||", "|||", "||", "|"],
    33: ["[          ]", "[=         ]", "[==        ]", "[===       ]", "[====      ]", "[=====     ]", "[======    ]", "[=======   ]", "[========  ]", "[========= ]", "[==========]"],
    34: ["(*---------)", "(-*--------)", "(--*-------)", "(---*------)", "(----*-----)", "(-----*----)", "(------*---)", "(-------*--)", "(--------*-)", "(---------*)"],
    35: ["█▒▒▒▒▒▒▒▒▒", "███▒▒▒▒▒▒▒", "█████▒▒▒▒▒", "███████▒▒▒", "██████████"],
    36: ["[                    ]", "[=>                  ]", "[===>                ]", "[=====>              ]", "[======>             ]", "[========>           ]", "[==========>         ]", "[============>       ]", "[==============>     ]", "[================>   ]", "[==================> ]", "[===================>]"],
    37: [chr(_CLOCK_ONE_OCLOCK + i) for i in range(12)],
    38: [c for i in range(12) for c in (chr(_CLOCK_ONE_OCLOCK + i), chr(_CLOCK_ONE_THIRTY + i))],
    39: ["🌍", "🌎", "🌏"],
    40: ["◜", "◝", "◞", "◟"],
    41: ["⬒", "⬔", "⬓", "⬕"],
    42: ["⬖", "⬘", "⬗", "⬙"],
    43: ["[>>>          >]", "[]>>>>        []", "[]  >>>>      []", "[]    >>>>    []", "[]      >>>>  []", "[]        >>>>[]", "[>>          >>]"],
    44: ["♠", "♣", "♥", "♦"],
    45: ["➞", "➟", "➠", "➡", "➠", "➟"],
    46: ["  |  ", " \\   ", "_    ", " \\   ", "  |  ", "   / ", "    _", "   / "],
    47: ["  . . . .", ".   . . .", ". .   . .", ". . .   .", ". . . .  ", ". . . . ."],
    48: [" |     ", "  /    ", "   _   ", "    \\  ", "     | ", "    \\  ", "   _   ", "  /    "],
    49: ["⎺", "⎻", "⎼", "⎽", "⎼", "⎻"],
    50: ["▹▹▹▹▹", "▸▹▹▹▹", "▹▸▹▹▹", "▹▹▸▹▹", "▹▹▹▸▹", "▹▹▹▹▸"],
    51: ["[    ]", "[   =]", "[  ==]", "[ ===]", "[====]", "[=== ]", "[==  ]", "[=   ]"],
    52: ["( ●    )", "(  ●   )", "(   ●  )", "(    ● )", "(     ●)", "(    ● )", "(   ●  )", "(  ●   )", "( ●    )"],
    53: ["✶", "✸", "✹", "✺", "✹", "✷"],
    54: ["▐|\\____________▌", "▐_|\\___________▌", "▐__|\\__________▌", "▐___|\\_________▌", "▐____|\\________▌", "▐_____|\\_______▌", "▐______|\\______▌", "▐_______|\\_____▌", "▐________|\\____▌", "▐_________|\\___▌", "▐__________|\\__▌", "▐___________|\\_▌", "▐____________|\\▌", "▐____________/|▌", "▐___________/|_▌", "▐__________/|__▌", "▐_________/|___▌", "▐________/|____▌", "▐_______/|_____▌", "▐______/|______▌", "▐_____/|_______▌", "▐____/|________▌", "▐___/|_________▌", "▐__/|__________▌", "▐_/|___________▌", "▐/|____________▌"],
    55: ["▐⠂       ▌", "▐⠈       ▌", "▐ ⠂      ▌", "▐ ⠠      ▌", "▐  ⡀     ▌", "▐  ⠠     ▌", "▐   ⠂    ▌", "▐   ⠈    ▌", "▐    ⠂   ▌", "▐    ⠠   ▌", "▐     ⡀  ▌", "▐     ⠠  ▌", "▐      ⠂ ▌", "▐      ⠈ ▌", "▐       ⠂▌", "▐       ⠠▌", "▐       ⡀▌", "▐      ⠠ ▌", "▐      ⠂ ▌", "▐     ⠈  ▌", "▐     ⠂  ▌", "▐    ⠠   ▌", "▐    ⡀   ▌", "▐   ⠠    ▌", "▐   ⠂    ▌", "▐  ⠈     ▌", "▐  ⠂     ▌", "▐ ⠠      ▌", "▐ ⡀      ▌", "▐⠠       ▌"],
    56: ["¿", "?"],
    57: ["⢹", "⢺", "⢼", "⣸", "⣇", "⡧", "⡗", "⡏"],
    58: ["⢄", "⢂", "⢁", "⡁", "⡈", "⡐", "⡠"],
    59: [".  ", ".. ", "...", " ..", "  .", "   "],
    60: [".", "o", "O", "°", "O", "o", "."],
    61: ["▓", "▒", "░"],
    62: ["▌", "▀", "▐", "▄"],
    63: ["⊶", "⊷"],
    64: ["▪", "▫"],
    65: ["□", "■"],
    66: ["▮", "▯"],
    67: ["-", "=", "≡"],
    68: ["d", "q", "p", "b"],
    69: ["∙∙∙", "●∙∙", "∙●∙", "∙∙●", "∙∙∙"],
    70: ["🌑 ", "🌒 ", "🌓 ", "🌔 ", "🌕 ", "🌖 ", "🌗 ", "🌘 "],
    71: ["☗", "☖"],
    72: ["⧇", "⧆"],
    73: ["◉", "◎"],
    74: ["㊂", "㊀", "㊁"],
    75: ["⦾", "⦿"],
    76: ["ဝ", "၀"],
    77: ["▌", "▀", "▐▄"],
}

_ATTRIBUTES: Dict[str, int] = {
    "black": 30, "red": 31, "green": 32, "yellow": 33,
    "blue": 34, "magenta": 35, "cyan": 36, "white": 37,
    "reset": 0, "bold": 1, "faint": 2, "italic": 3, "underline": 4,
    "blinkslow": 5, "blinkrapid": 6, "reversevideo": 7,
    "concealed": 8, "crossedout": 9,
    "fgBlack": 30, "fgRed": 31, "fgGreen": 32, "fgYellow": 33,
    "fgBlue": 34, "fgMagenta": 35, "fgCyan": 36, "fgWhite": 37,
    "fgHiBlack": 90, "fgHiRed": 91, "fgHiGreen": 92, "fgHiYellow": 93,
    "fgHiBlue": 94, "fgHiMagenta": 95, "fgHiCyan": 96, "fgHiWhite": 97,
    "bgBlack": 40, "bgRed": 41, "bgGreen": 42, "bgYellow": 43,
    "bgBlue": 44, "bgMagenta": 45, "bgCyan": 46, "bgWhite": 47,
    "bgHiBlack": 100, "bgHiRed": 101, "bgHiGreen": 102, "bgHiYellow": 103,
    "bgHiBlue": 104, "bgHiMagenta": 105, "bgHiCyan": 106, "bgHiWhite": 107,
}

_IS_WINDOWS = os.name == "nt"


class InvalidColorError(ValueError):
    """Raised when a colour name is not one the spinner knows."""

    def __init__(self, name: str = "") -> None:
        super().__init__("invalid color")
        self.name = name


def _color_enabled() -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _colorizer(names: Iterable[str]) -> Callable[[str], str]:
    codes = []
    for name in names:
        if name not in _ATTRIBUTES:
            raise InvalidColorError(name)
        codes.append(str(_ATTRIBUTES[name]))
    sequence = ";".join(codes)

    def colorize(text: str) -> str:
        if not _color_enabled():
            return text
        return f"\x1b[{sequence}m{text}\x1b[0m"

    return colorize


class Spinner:
    """A spinning progress indicator drawn on a background thread."""

    def __init__(
        self,
        chars: Iterable[str],
        delay: float,
        *,
        parent: Optional[threading.Event] = None,
        prefix: str = "",
        suffix: str = "",
        final_msg: str = "",
        color: Union[str, Iterable[str], None] = None,
        hide_cursor: bool = False,
        writer: Optional[TextIO] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._parent = parent
        self._chars: List[str] = list(chars)
        self._active = False
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._last_output = ""
        self.delay = delay
        self.prefix = prefix
        self.suffix = suffix
        self.final_msg = final_msg
        self.hide_cursor = hide_cursor
        self.writer: TextIO = writer if writer is not None else sys.stdout
        self.pre_update: Optional[Callable[["Spinner"], None]] = None
        self.post_update: Optional[Callable[["Spinner"], None]] = None
        if color is None:
            self._colorize = _colorizer(["white"])
        elif isinstance(color, str):
            self._colorize = _colorizer([color])
        else:
            self._colorize = _colorizer(color)

    @property
    def chars(self) -> List[str]:
        """A copy of the current character set."""
        with self._lock:
            return list(self._chars)

    def active(self) -> bool:
        """Return whether the spinner is currently running."""
        return self._active

    def start(self) -> None:
        """Start drawing the indicator; does nothing if already running."""
        with self._lock:
            if self._active:
                return
            if self.hide_cursor and not _IS_WINDOWS:
                sys.stdout.write("\033[?25l")
                sys.stdout.flush()
            self._active = True
            self._cancel = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._cancel, self.delay), daemon=True
            )
            self._thread.start()

    def _cancelled(self, cancel: threading.Event) -> bool:
        return cancel.is_set() or (self._parent is not None and self._parent.is_set())

    def _run(self, cancel: threading.Event, delay: float) -> None:
        index = 0
        while True:
            cancel.wait(delay)
            if self._cancelled(cancel):
                return
            with self._lock:
                if not self._active or cancel.is_set():
                    return
                chars = self._chars
                if not chars:
                    index = 0
                    continue
                if index >= len(chars):
                    index = 0
                char = chars[index]
                index += 1

                self._erase()
                if self.pre_update is not None:
                    self.pre_update(self)

                if _IS_WINDOWS and self.writer is sys.stderr:
                    shown = char
                else:
                    shown = self._colorize(char)
                self._write(f"\r{self.prefix}{shown}{self.suffix} ")
                self._last_output = f"\r{self.prefix}{char}{self.suffix} "

                if self.post_update is not None:
                    self.post_update(self)

    def stop(self) -> None:
        """Stop the indicator, erase it and write the final message."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            self._cancel.set()
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            if self.hide_cursor and not _IS_WINDOWS:
                sys.stdout.write("\033[?25h")
                sys.stdout.flush()
            self._erase()
            if self.final_msg:
                self._write(self.final_msg)

    def restart(self) -> None:
        """Stop and start the indicator."""
        self.stop()
        self.start()

    def reverse(self) -> None:
        """Reverse the order of the character set."""
        with self._lock:
            self._chars.reverse()

    def set_color(self, *args: str) -> None:
        """Set the colour attributes by name and restart the spinner.

        Raises :class:`InvalidColorError` if any name is unknown.
        """
        colorize = _colorizer(args)
        with self._lock:
            self._colorize = colorize
        self.restart()

    def update_speed(self, delay: float) -> None:
        """Set the delay between frames; takes effect on the next start."""
        with self._lock:
            self.delay = delay

    def update_char_set(self, chars: Iterable[str]) -> None:
        """Replace the character set."""
        with self._lock:
            self._chars = list(chars)

    def lock(self) -> None:
        """Acquire the spinner's lock, pausing frame updates."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the spinner's lock."""
        self._lock.release()

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    def _write(self, text: str) -> None:
        self.writer.write(text)
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()

    def _erase(self) -> None:
        n = len(self._last_output)
        if _IS_WINDOWS:
            self._write("\r" + " " * n + "\r")
            self._last_output = ""
            return
        for c in ("\b", "\127", "\b", "\033[K"):
            self._write(c * n)
        self._write("\r\033[K")
        self._last_output = ""


def generate_number_sequence(length: int) -> List[str]:
    """Return the numbers 0 to ``length - 1`` as strings."""
    return [str(i) for i in range(length)]