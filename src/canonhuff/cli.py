from collections.abc import Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.table import Table
from rich.traceback import install

from .canonical import canonicalize, canonicalize_lengths
from .errors import HuffmanError
from .log import setup_logging
from .tree import build_tree, extract_codes, format_tree
from .utils.bits import format_bits

V = TypeVar("V")

console = Console()
install(show_locals=True)

app = typer.Typer(help="Build Huffman codes and their canonical form.")


def _parse_pairs(pairs: list[str], convert: Callable[[str], V]) -> dict[str, V]:
    table: dict[str, V] = {}
    for pair in pairs:
        symbol, sep, value = pair.rpartition("=")
        if not sep or not symbol:
            raise ValueError(f"Expected SYMBOL=VALUE, got {pair!r}")
        if symbol in table:
            raise ValueError(f"Symbol {symbol!r} is given more than once")
        try:
            table[symbol] = convert(value)
        except ValueError:
            raise ValueError(f"Invalid value {value!r} for symbol {symbol!r}") from None
    return table


@app.command()
def build(
    pairs: list[str] = typer.Argument(..., help="Weighted symbols as SYMBOL=WEIGHT"),
    tree: bool = typer.Option(False, "--tree", help="Print the Huffman tree"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    setup_logging(logging)
    try:
        weights = _parse_pairs(pairs, float)
        root = build_tree((weight, symbol) for symbol, weight in weights.items())
        codes = extract_codes(root)
        canonical_codes = canonicalize(codes)
    except (HuffmanError, ValueError) as e:
        console.print(f"[bold red]Error:[/] {e}")
        raise typer.Exit(1)

    if tree:
        console.print(format_tree(root), markup=False, highlight=False)

    table = Table("Symbol", "Weight", "Huffman code", "Canonical code")
    for symbol in sorted(canonical_codes):
        table.add_row(symbol, f"{weights[symbol]:g}", format_bits(codes[symbol]), format_bits(canonical_codes[symbol]))
    console.print(table)


@app.command()
def canonical(
    pairs: list[str] = typer.Argument(..., help="Code lengths as SYMBOL=LENGTH"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    setup_logging(logging)
    try:
        lengths = _parse_pairs(pairs, int)
        codes = canonicalize_lengths(lengths)
    except (HuffmanError, ValueError) as e:
        console.print(f"[bold red]Error:[/] {e}")
        raise typer.Exit(1)

    table = Table("Symbol", "Length", "Canonical code")
    for symbol in sorted(codes):
        table.add_row(symbol, str(lengths[symbol]), format_bits(codes[symbol]))
    console.print(table)


if __name__ == "__main__":
    app()
