"""
ESC/P command encoder.

Drives ESC/P and ESC/P2 dot matrix printers (e.g. Epson LQ-570, LX-300) by
writing command bytes straight to a raw output sink: a device node, a file,
or a Windows printer share path. Bypassing the graphics print subsystem keeps
the printer in its fast text mode and gives exact control over the layout.

One ESCPrinter owns one sink for one print job:

    >>> printer = ESCPrinter("/dev/usb/lp0", is_24pin=True)
    >>> if printer.initialize():
    ...     try:
    ...         printer.set_margins(5, 75)
    ...         printer.print("Total: 10.00")
    ...         printer.line_feed()
    ...     finally:
    ...         printer.close()

or, raising PrinterConnectionError when the target cannot be opened:

    >>> with ESCPrinter("/dev/usb/lp0") as printer:
    ...     printer.form_feed()

The encoder is not thread-safe; callers serialize access themselves.
"""

import codecs
from typing import Any, BinaryIO, Dict, Final, Optional, Union

from matrixprinter import get_logger, load_config
from matrixprinter.escp.commands.charset import (
    CharacterTable,
    set_character_table,
    table_code,
    table_codec,
)
from matrixprinter.escp.commands.fonts import ESC_10CPI, ESC_15CPI, set_proportional
from matrixprinter.escp.commands.hardware import ESC_INIT_PRINTER
from matrixprinter.escp.commands.page_control import set_left_margin, set_right_margin
from matrixprinter.escp.commands.positioning import (
    ABSOLUTE_HORIZONTAL_UNITS_PER_INCH,
    CRFF,
    CRLF,
    HT,
    RELATIVE_HORIZONTAL_UNITS_PER_INCH,
    UNITS_PER_INCH_9PIN,
    UNITS_PER_INCH_24PIN,
    advance_vertical,
    centimeters_to_units,
    set_horizontal_position,
    set_relative_horizontal_position,
    split_vertical_advance,
)
from matrixprinter.escp.commands.print_quality import ESC_DRAFT_MODE, ESC_LQ_MODE
from matrixprinter.escp.commands.text_formatting import set_bold
from matrixprinter.exceptions import (
    PrinterConnectionError,
    PrinterError,
    PrinterNotInitializedError,
    PrinterWriteError,
)

__all__ = ["ESCPrinter", "DEFAULT_CHARACTER_TABLE"]

logger: Final = get_logger(__name__)

DEFAULT_CHARACTER_TABLE: Final[CharacterTable] = CharacterTable.BRAZIL
MIN_MARGIN_COLUMNS: Final[int] = 1
MAX_MARGIN_COLUMNS: Final[int] = 255


class ESCPrinter:
    """
    Command encoder bound to one printer target.

    Attributes:
        target: Path or share name the sink is opened from.
        is_24pin: True for 24/48-pin ESC/P2 printers (1/180 inch vertical
            unit), False for 9-pin printers (1/216 inch).
    """

    def __init__(
        self,
        target: str,
        is_24pin: bool = False,
        *,
        default_table: Union[CharacterTable, int] = DEFAULT_CHARACTER_TABLE,
        encoding: Optional[str] = None,
    ) -> None:
        """
        Create an encoder. Nothing is opened until initialize().

        Args:
            target: Printer path, e.g. "/dev/usb/lp0" or r"\\\\server\\LX300".
            is_24pin: Pin class of the print head.
            default_table: Character table selected by initialize(), as a
                CharacterTable or a raw ESC ( t code (0-255).
            encoding: Codec for text passed to print(). None follows the
                codec of the active character table.

        Raises:
            ValueError: If target is empty or default_table is not a valid
                table code.
            LookupError: If encoding is not a known codec.
        """
        if not target:
            raise ValueError("Printer target must be a non-empty string")
        if encoding is not None:
            codecs.lookup(encoding)
        table_code(default_table)

        self._target = target
        self._is_24pin = is_24pin
        self._default_table = default_table
        self._encoding = encoding
        self._stream: Optional[BinaryIO] = None
        self._initialized = False
        self._closed = False
        self._active_table: Optional[Union[CharacterTable, int]] = None

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "ESCPrinter":
        """
        Build an encoder from package configuration (see load_config()).

        Raises:
            ValueError: If printer_target is missing, printer_24pin is not a
                boolean or the character table name is unknown.
        """
        if config is None:
            config = load_config()

        target = config.get("printer_target")
        if not target:
            raise ValueError("Configuration has no printer_target")

        is_24pin = config.get("printer_24pin", False)
        if not isinstance(is_24pin, bool):
            raise ValueError(f"printer_24pin must be true or false, got {is_24pin!r}")

        table_name = config.get("default_character_table") or DEFAULT_CHARACTER_TABLE.name
        return cls(
            str(target),
            is_24pin,
            default_table=CharacterTable.from_name(table_name),
            encoding=config.get("text_encoding"),
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def target(self) -> str:
        return self._target

    @property
    def is_24pin(self) -> bool:
        return self._is_24pin

    @property
    def is_initialized(self) -> bool:
        """True iff the sink is open and the setup sequence was written."""
        return self._initialized

    @property
    def active_table(self) -> Optional[Union[CharacterTable, int]]:
        """Character table last selected through this encoder."""
        return self._active_table

    @property
    def vertical_units_per_inch(self) -> int:
        return UNITS_PER_INCH_24PIN if self._is_24pin else UNITS_PER_INCH_9PIN

    @property
    def text_encoding(self) -> str:
        if self._encoding is not None:
            return self._encoding
        if self._active_table is not None:
            return table_codec(self._active_table)
        return table_codec(self._default_table)

    def describe(self) -> str:
        return f"<ESCPrinter[target={self._target}, 24pin={self._is_24pin}]>"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"ESCPrinter(target={self._target!r}, is_24pin={self._is_24pin!r}, "
            f"initialized={self._initialized!r})"
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def initialize(self) -> bool:
        """
        Open the sink and reset the printer to job defaults.

        Writes, in order: reset (ESC @), 10 CPI, draft quality, and the
        default character table.

        Returns:
            True if the sink opened and the setup sequence was written.
            False if the target could not be opened (nothing is written),
            if a setup write failed (the sink is released), or if this
            encoder was already closed. There is no retry; construct a new
            encoder to try again.
        """
        if self._closed:
            logger.error(f"{self.describe()} was closed and cannot be initialized again")
            return False
        if self._initialized:
            logger.warning(f"{self.describe()} is already initialized")
            return True

        try:
            self._stream = open(self._target, "wb", buffering=0)
        except OSError as e:
            logger.error(f"Could not open printer target {self._target}: {e}")
            self._stream = None
            return False

        try:
            self.send(ESC_INIT_PRINTER)
            self.select_10cpi()
            self.select_draft_printing()
            self.set_character_set(self._default_table)
        except PrinterError as e:
            logger.error(f"Printer setup failed for {self._target}: {e}")
            self._release_stream()
            return False

        self._initialized = True
        logger.info(f"Printer initialized: {self.describe()}")
        return True

    def close(self) -> None:
        """
        Flush and release the sink. Never raises.

        Safe to call after a failed initialize() or more than once; any
        failure is logged and swallowed so a job can always release its
        printer.
        """
        was_open = self._stream is not None
        self._initialized = False
        self._closed = True
        self._release_stream()
        if was_open:
            logger.info(f"Printer closed: {self.describe()}")
        else:
            logger.debug(f"close() on {self.describe()} without an open sink")

    def _release_stream(self) -> None:
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            stream.flush()
        except Exception as e:
            logger.warning(f"Flushing {self._target} failed: {e}")
        finally:
            try:
                stream.close()
            except Exception as e:
                logger.warning(f"Closing {self._target} failed: {e}")

    def __enter__(self) -> "ESCPrinter":
        if not self.initialize():
            raise PrinterConnectionError("Could not initialize printer", target=self._target)
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Raw output
    # -------------------------------------------------------------------------

    def send(self, data: bytes) -> None:
        """
        Write raw bytes to the sink.

        Raises:
            PrinterNotInitializedError: If the sink is not open.
            PrinterWriteError: If the sink raises OSError.
        """
        if self._stream is None:
            raise PrinterNotInitializedError(
                "Printer is not initialized", target=self._target
            )
        try:
            self._stream.write(data)
        except OSError as e:
            logger.error(f"Write of {len(data)} bytes to {self._target} failed: {e}")
            raise PrinterWriteError(
                "Write to printer failed",
                target=self._target,
                context={"bytes": len(data)},
            ) from e
        logger.debug("Sent %d bytes: %s", len(data), data.hex(" "))

    # -------------------------------------------------------------------------
    # Pitch, quality, emphasis
    # -------------------------------------------------------------------------

    def select_10cpi(self) -> None:
        self.send(ESC_10CPI)

    def select_15cpi(self) -> None:
        self.send(ESC_15CPI)

    def select_draft_printing(self) -> None:
        self.send(ESC_DRAFT_MODE)

    def select_lq_printing(self) -> None:
        self.send(ESC_LQ_MODE)

    def bold(self, enable: bool) -> None:
        self.send(set_bold(enable))

    def proportional_mode(self, enable: bool) -> None:
        self.send(set_proportional(enable))

    def set_character_set(self, table: Union[CharacterTable, int]) -> None:
        """Assign table to slot 1, then select slot 1."""
        self.send(set_character_table(table))
        self._active_table = table

    # -------------------------------------------------------------------------
    # Paper and head motion
    # -------------------------------------------------------------------------

    def line_feed(self) -> None:
        # CR first so the head returns to the margin whatever the auto-LF setting.
        self.send(CRLF)

    def form_feed(self) -> None:
        self.send(CRFF)

    def advance_vertical(self, centimeters: float) -> None:
        """
        Feed paper forward by approximately the given distance.

        The distance is truncated to whole units (1/180 inch on 24-pin,
        1/216 inch on 9-pin) and sent as ESC J steps of at most 127 units.

        Raises:
            ValueError: If centimeters is negative.
        """
        units = centimeters_to_units(centimeters, self.vertical_units_per_inch)
        self.send(b"".join(advance_vertical(n) for n in split_vertical_advance(units)))

    def advance_horizontal(self, centimeters: float) -> None:
        """
        Move the print head right by the given distance (1/120 inch units).

        Raises:
            ValueError: If centimeters is negative or beyond the command range.
        """
        units = centimeters_to_units(centimeters, RELATIVE_HORIZONTAL_UNITS_PER_INCH)
        self.send(set_relative_horizontal_position(units))

    def set_absolute_horizontal_position(self, centimeters: float) -> None:
        """
        Place the print head at a distance from the left margin (1/60 inch units).

        Raises:
            ValueError: If centimeters is negative or beyond the command range.
        """
        units = centimeters_to_units(centimeters, ABSOLUTE_HORIZONTAL_UNITS_PER_INCH)
        self.send(set_horizontal_position(units))

    def horizontal_tab(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Tab count must be >= 0, got {count}")
        self.send(HT * count)

    def set_margins(self, left: int, right: int) -> None:
        """
        Set left and right margins in columns at the current pitch.

        Raises:
            ValueError: If either margin is outside 1-255. Nothing is sent.
        """
        for name, columns in (("Left", left), ("Right", right)):
            if not (MIN_MARGIN_COLUMNS <= columns <= MAX_MARGIN_COLUMNS):
                raise ValueError(
                    f"{name} margin must be {MIN_MARGIN_COLUMNS}-{MAX_MARGIN_COLUMNS}, "
                    f"got {columns}"
                )
        self.send(set_left_margin(left))
        self.send(set_right_margin(right))

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def print(self, text: Union[str, bytes, bytearray, memoryview]) -> None:
        """
        Write text to the printer without translation.

        Strings are encoded with text_encoding; characters the codec cannot
        represent are sent as '?'. Bytes-like values are written as they are.
        Glyphs are chosen by the printer's active character table.

        Raises:
            TypeError: If text is neither a string nor bytes-like.
        """
        if isinstance(text, str):
            data = text.encode(self.text_encoding, errors="replace")
        elif isinstance(text, (bytes, bytearray, memoryview)):
            data = bytes(text)
        else:
            raise TypeError(f"print() expects str or bytes, got {type(text).__name__}")
        self.send(data)
