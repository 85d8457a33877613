"""Locale-aware number formatting.

Formats numbers with a thousands delimiter, a decimal separator and a fixed
precision. Rounding is half-up on the exact value of the input.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Mapping, Optional, Tuple, Union

Number = Union[int, float, Decimal]

KILOBYTE = 1024
STORAGE_UNITS = (None, "kb", "mb", "gb", "tb")


@dataclass(frozen=True)
class NumberFormat:
    """Number formatting options.

    Attributes:
        precision: Digits after the separator.
        separator: Decimal separator.
        delimiter: Thousands delimiter.
        strip_insignificant_zeros: Remove trailing zero fraction digits and a
            then-trailing separator.
        format: Template for unit-bearing output, "%n" is the number and
            "%u" the unit.
    """

    precision: Optional[int] = None
    separator: Optional[str] = None
    delimiter: Optional[str] = None
    strip_insignificant_zeros: Optional[bool] = None
    format: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "NumberFormat":
        """Build from a translation-table entry such as ``number.format``.

        Unknown keys are ignored; a non-mapping yields empty options.
        """
        if not isinstance(data, Mapping):
            return cls()
        precision = data.get("precision")
        strip = data.get("strip_insignificant_zeros")
        return cls(
            precision=int(precision) if precision is not None else None,
            separator=data.get("separator"),
            delimiter=data.get("delimiter"),
            strip_insignificant_zeros=bool(strip) if strip is not None else None,
            format=data.get("format"),
        )

    @classmethod
    def merge(cls, *sources: Optional["NumberFormat"]) -> "NumberFormat":
        """First non-None value per field wins, scanning left to right."""
        merged = {}
        for name in cls.__dataclass_fields__:
            for source in sources:
                if source is None:
                    continue
                value = getattr(source, name)
                if value is not None:
                    merged[name] = value
                    break
        return cls(**merged)


DEFAULT_NUMBER_FORMAT = NumberFormat(
    precision=3,
    separator=".",
    delimiter=",",
    strip_insignificant_zeros=False,
)


def _group(digits: str, delimiter: str) -> str:
    chunks = []
    while digits:
        chunks.insert(0, digits[-3:])
        digits = digits[:-3]
    return delimiter.join(chunks)


def to_number(number: Number, options: Optional[NumberFormat] = None) -> str:
    """Format a number with grouping and fixed precision.

    Args:
        number: Number to format.
        options: Formatting options; unset fields use
            DEFAULT_NUMBER_FORMAT.

    Returns:
        Formatted string, e.g. ``to_number(1234567.5, NumberFormat(precision=2))``
        gives "1,234,567.50".
    """
    fmt = NumberFormat.merge(options, DEFAULT_NUMBER_FORMAT)
    precision = max(int(fmt.precision), 0)

    value = Decimal(number)
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Infinity" if value < 0 else "Infinity"

    negative = value < 0
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        # Wide enough for any float at the requested precision
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        fixed = format(abs(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")

    integer_part, _, fraction = fixed.partition(".")
    formatted = _group(integer_part, fmt.delimiter)
    if precision > 0:
        formatted += fmt.separator + fraction

    if negative:
        formatted = "-" + formatted

    if fmt.strip_insignificant_zeros and precision > 0:
        formatted = re.sub(r"0+$", "", formatted)
        formatted = re.sub(re.escape(fmt.separator) + "$", "", formatted)

    return formatted


def human_size_parts(size: Number) -> Tuple[float, Optional[str], int]:
    """Scale a byte count to the largest storage unit up to terabytes.

    Returns:
        (scaled size, unit key or None for bytes, default precision)
    """
    scaled = float(size)
    iterations = 0
    while scaled >= KILOBYTE and iterations < len(STORAGE_UNITS) - 1:
        scaled = scaled / KILOBYTE
        iterations += 1

    if iterations == 0:
        return scaled, None, 0

    precision = 0 if scaled.is_integer() else 1
    return scaled, STORAGE_UNITS[iterations], precision


def apply_unit_format(template: str, number: str, unit: str) -> str:
    """Fill a "%n"/"%u" template."""
    return template.replace("%u", unit).replace("%n", number)
