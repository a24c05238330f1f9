"""
SHIFTCRACK - CLI entry point.
"""

import typer
from rich.console import Console
from rich.table import Table

from core.config import settings
from core.log import configure_logging
from ciphers.caesar import decrypt as caesar_decrypt, encrypt as caesar_encrypt
from cryptanalysis.frequency import analyze_report
from cryptanalysis.known_plaintext import deduce_key

configure_logging()

app = typer.Typer(help="SHIFTCRACK - Caesar cipher and cryptanalysis")
console = Console()
err_console = Console(stderr=True)


def _preview(text: str) -> str:
    limit = settings.PREVIEW_CHARS
    return text if len(text) <= limit else text[:limit] + "..."


@app.command()
def encrypt(
    text: str = typer.Argument(..., help="Plaintext to encrypt"),
    shift: int = typer.Option(..., "--shift", "-s", help="Shift key (any integer, reduced mod 26)"),
):
    """Encrypt TEXT with a Caesar shift."""
    console.print(caesar_encrypt(text, shift), markup=False, highlight=False, soft_wrap=True)


@app.command()
def decrypt(
    text: str = typer.Argument(..., help="Ciphertext to decrypt"),
    shift: int = typer.Option(..., "--shift", "-s", help="Shift key (any integer, reduced mod 26)"),
):
    """Decrypt TEXT with a known Caesar shift."""
    console.print(caesar_decrypt(text, shift), markup=False, highlight=False, soft_wrap=True)


@app.command()
def analyze(
    ciphertext: str = typer.Argument(..., help="Ciphertext to attack"),
    top: int = typer.Option(settings.TOP_CANDIDATES, "--top", "-n", min=0, help="Candidates to show (0 = all 26)"),
    workers: int = typer.Option(settings.ANALYSIS_WORKERS, "--workers", "-w", min=1, help="Threads for scoring"),
):
    """Rank every shift of CIPHERTEXT by closeness to English letter frequencies."""
    report = analyze_report(ciphertext, workers=workers)

    table = Table(title=f"Frequency analysis ({report.letter_count} letters)")
    table.add_column("Rank", justify="right")
    table.add_column("Shift", justify="right", style="cyan")
    table.add_column("Phi", justify="right")
    table.add_column("Plaintext")
    for rank, candidate in enumerate(report.top(top), start=1):
        table.add_row(str(rank), f"{candidate.shift:02}", f"{candidate.score:.3f}", _preview(candidate.plaintext))
    console.print(table)
    if report.letter_count == 0:
        console.print("[yellow]No letters in ciphertext:[/yellow] all shifts tie.")
    else:
        console.print(f"[bold green]Most likely shift:[/bold green] {report.best.shift}")


@app.command()
def deduce(
    plaintext: str = typer.Argument(..., help="Known plaintext"),
    ciphertext: str = typer.Argument(..., help="Ciphertext aligned with the plaintext"),
):
    """Deduce the shift from a known plaintext/ciphertext pair."""
    key = deduce_key(plaintext, ciphertext)
    if key is None:
        err_console.print("[red]Could not deduce the key[/red] (samples empty or of different lengths)")
        raise typer.Exit(1)
    console.print(f"The key is likely {key}")


if __name__ == "__main__":
    app()
