from __future__ import annotations

import csv
import html
import io
import math
import re
from decimal import Decimal
from typing import Any, Protocol

from .models import Item, Number, User

_EXPONENT_PAD = re.compile(r"e([+-])0*(\d)")


def format_value(value: Number) -> str:
    """Render a numeric value the way the report literals expect.

    Floats follow JavaScript number-to-string rules: integral values below
    1e21 drop the trailing ".0" (1500.0 -> "1500"), non-finite values render
    as "NaN" and "Infinity", positional notation is used down to 1e-6 and
    exponents carry no zero padding (1e21 -> "1e+21", 1e-7 -> "1e-7").
    """
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e-4:
        return f"{Decimal(repr(value)):f}"
    return _EXPONENT_PAD.sub(r"e\1\2", repr(value))


class FormatStrategy(Protocol):
    """Rendering rules for one textual report shape."""

    def header(self, user: User) -> str: ...

    def format_item(self, item: Item, user: User) -> str: ...

    def footer(self, total: Number) -> str: ...


class CsvReportFormat:
    HEADER = "ID,NOME,VALOR,USUARIO\n"

    def __init__(self, *, quoting: bool = False) -> None:
        self._quoting = quoting

    def header(self, user: User) -> str:
        return self.HEADER

    def format_item(self, item: Item, user: User) -> str:
        fields = [str(item.id), str(item.name), format_value(item.value), str(user.name)]
        if self._quoting:
            return self._quoted_row(fields)
        # Fields are joined verbatim: embedded commas or newlines are not escaped
        return ",".join(fields) + "\n"

    def footer(self, total: Number) -> str:
        return f"\nTotal,,\n{format_value(total)},,\n"

    @staticmethod
    def _quoted_row(fields: list[Any]) -> str:
        buf = io.StringIO()
        csv.writer(buf, lineterminator="\n").writerow(fields)
        return buf.getvalue()


class HtmlReportFormat:
    BOLD_STYLE = ' style="font-weight:bold;"'

    def __init__(self, *, escape: bool = False) -> None:
        self._escape = escape

    def _text(self, value: Any) -> str:
        text = value if isinstance(value, str) else str(value)
        return html.escape(text) if self._escape else text

    def header(self, user: User) -> str:
        parts = [
            "<html><body>\n",
            "<h1>Relatório</h1>\n",
            f"<h2>Usuário: {self._text(user.name)}</h2>\n",
            "<table>\n",
            "<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n",
        ]
        return "".join(parts)

    def format_item(self, item: Item, user: User) -> str:
        style = self.BOLD_STYLE if item.priority else ""
        return (
            f"<tr{style}><td>{self._text(item.id)}</td>"
            f"<td>{self._text(item.name)}</td>"
            f"<td>{format_value(item.value)}</td></tr>\n"
        )

    def footer(self, total: Number) -> str:
        return f"</table>\n<h3>Total: {format_value(total)}</h3>\n</body></html>\n"
