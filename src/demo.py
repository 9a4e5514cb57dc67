"""
Demo — консольная демонстрация Sequence Codec

Запуск:
    python -m src.demo
"""

import logging
import sys

from src.core.sequence import (
    from_ordinal,
    get_first,
    get_last,
    get_maximum,
    get_minimum,
    next_sequence,
    previous_sequence,
    to_ordinal,
)

logger = logging.getLogger(__name__)


def build_demo_lines() -> list[str]:
    """
    Строки демонстрации: примеры вызовов и их результаты.

    Returns:
        Список строк для вывода в консоль
    """
    lines = ["=== Alphabetical Sequence Functions Demo ===", ""]

    lines.append("next_sequence examples:")
    for seq in ("AAA", "AAZ", "AZZ", "ZZZ"):
        lines.append(f"{seq} -> {next_sequence(seq)}")
    lines.append("")

    lines.append("previous_sequence examples:")
    for seq in ("AAB", "ABA", "BAA", "AAAA"):
        lines.append(f"{seq} -> {previous_sequence(seq)}")
    lines.append("")

    lines.append("Min/Max examples:")
    lines.append(f"min(ABC, ABD) = {get_minimum('ABC', 'ABD')}")
    lines.append(f"max(ABC, ABD) = {get_maximum('ABC', 'ABD')}")
    lines.append(f"min(AA, AAA) = {get_minimum('AA', 'AAA')}")
    lines.append("")

    lines.append("First/Last examples:")
    lines.append(f"first(3) = {get_first(3)}")
    lines.append(f"last(3) = {get_last(3)}")
    lines.append("")

    lines.append("Ordinal conversion examples:")
    for n in (0, 25, 26):
        lines.append(f"from_ordinal({n}) = {from_ordinal(n)}")
    for seq in ("A", "Z", "AA"):
        lines.append(f"to_ordinal({seq}) = {to_ordinal(seq)}")

    return lines


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    lines = build_demo_lines()
    logger.debug("Rendering %d demo lines", len(lines))

    for line in lines:
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
