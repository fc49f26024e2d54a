"""Command-line interface for Tab Theory.

Provides commands for:
- analyze: Key, tuning and scale of a score, optionally per-note labels
- tuning: Identify the string tuning of a score
- degrees: Scale notes and degrees of a given key
- name: Convert MIDI pitches to note names
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

app = typer.Typer(
    name="tab-theory",
    help="Key, tuning and scale degree analysis for tablature scores",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_tuning(value: Optional[str]) -> Optional[List[int]]:
    """Parse "64,59,55,50,45,40" into MIDI pitches."""
    if not value:
        return None
    try:
        return [int(p) for p in value.replace(" ", "").split(",") if p]
    except ValueError:
        raise typer.BadParameter(f"Tuning must be comma-separated MIDI pitches: {value}")


def _load_score(input_file: Path, tuning: Optional[str]):
    from .input import ScoreLoader

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    loader = ScoreLoader(tuning=_parse_tuning(tuning))
    try:
        return loader.load(input_file)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="Score file: JSON, MIDI or MusicXML"),
    tuning: Optional[str] = typer.Option(
        None, "--tuning", "-t", help="String pitches for staves without tuning, e.g. 64,59,55,50,45,40"
    ),
    labels: bool = typer.Option(
        False, "--labels", "-l", help="Show a label for every note"
    ),
    target: str = typer.Option(
        "scale-degrees", "--target", help="Label kind: tab-numbers, tab-numbers-octave, scale-degrees, scale-degrees-roman"
    ),
    name_format: str = typer.Option(
        "english", "--format", "-f", help="Note names: english, german, solfege (or *_flat)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print results as JSON"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug output"
    ),
):
    """Detect the key and tuning of a score.

    Examples:
        tab-theory analyze song.json
        tab-theory analyze song.mid --labels --target scale-degrees-roman
    """
    from .config import AppSettings
    from .inference import KeyDetector, TuningIdentifier, get_scale_notes
    from .output import KeyCache, NoteLabeler

    _setup_logging(verbose)
    score = _load_score(input_file, tuning)

    try:
        settings = AppSettings.from_dict({
            "display": {"note_names_target": target},
            "notation": {"note_name_format": name_format},
        })
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    cache = KeyCache(KeyDetector())
    key_info = cache.get(score)
    tuning_info = TuningIdentifier().from_score(score)
    scale_notes = get_scale_notes(key_info)

    note_labels = []
    if labels:
        labeler = NoteLabeler(settings=settings, cache=cache)
        note_labels = labeler.label_score(score)

    if json_output:
        result = {
            "file": str(input_file),
            "notes": key_info.note_count,
            "key": {
                "root": key_info.root,
                "mode": key_info.mode,
                "name": key_info.name,
                "confidence": key_info.confidence,
                "relative": key_info.relative_key,
            },
            "tuning": {
                "name": tuning_info.name,
                "notes": list(tuning_info.notes),
                "midi_values": list(tuning_info.midi_values),
                "display": tuning_info.formatted,
            },
            "scale": scale_notes,
        }
        if labels:
            result["labels"] = [
                {"pitch": note.pitch, "label": text} for note, text in note_labels
            ]
        console.print_json(data=result)
        return

    console.print(f"\n[bold blue]Analysis: {input_file.name}[/bold blue]\n")
    console.print(f"   Notes: {key_info.note_count}")
    if key_info.note_count == 0:
        console.print("[yellow]No notes found, key is a placeholder[/yellow]")
    console.print(f"   [green]Key: {key_info.name} ({key_info.name_ru})[/green]")
    console.print(f"   Confidence: {key_info.confidence:.2f}")
    if key_info.relative_key:
        console.print(f"   Relative: {key_info.relative_key}")
    console.print(f"   Tuning: {tuning_info.name} ({tuning_info.formatted})")

    _show_scale_table(key_info)

    if labels:
        _show_labels_table(note_labels[:40])
        if len(note_labels) > 40:
            console.print(f"   [dim]... and {len(note_labels) - 40} more notes[/dim]")


@app.command("tuning")
def tuning_command(
    input_file: Path = typer.Argument(..., help="Score file: JSON, MIDI or MusicXML"),
):
    """Identify the string tuning of a score."""
    from .inference import get_tuning_info

    score = _load_score(input_file, None)
    info = get_tuning_info(score)

    table = Table(title=f"Tuning: {info.name}")
    table.add_column("String", style="cyan")
    table.add_column("Note", style="green")
    table.add_column("MIDI", style="yellow")
    for i, (note, midi) in enumerate(zip(info.notes, info.midi_values), start=1):
        table.add_row(str(i), note, str(midi))
    console.print(table)
    console.print(f"   {info.formatted}")


@app.command()
def degrees(
    root: str = typer.Argument(..., help="Tonic, e.g. C, F#, Bb"),
    mode: str = typer.Argument("major", help="major or minor"),
):
    """Show the scale notes and degrees of a key."""
    from .core import is_note_name
    from .inference import KeyInfo

    if not is_note_name(root):
        console.print(f"[red]Error: Unknown tonic: {root}[/red]")
        raise typer.Exit(1)

    if mode not in ("major", "minor"):
        console.print(f"[red]Error: Mode must be major or minor: {mode}[/red]")
        raise typer.Exit(1)

    _show_scale_table(KeyInfo(root=root, mode=mode, confidence=1.0))


@app.command()
def name(
    pitches: List[int] = typer.Argument(..., help="MIDI pitches"),
    octave: bool = typer.Option(True, "--octave/--no-octave", help="Include octave number"),
    name_format: str = typer.Option("english", "--format", "-f", help="Naming system"),
):
    """Convert MIDI pitches to note names."""
    from .core import midi_to_note_name_with_octave

    try:
        names = [midi_to_note_name_with_octave(p, octave, name_format) for p in pitches]
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(" ".join(names))


def _show_scale_table(key_info):
    """Display scale degrees of a key in a table."""
    from .inference import get_scale_degrees, get_scale_notes

    table = Table(title=f"Scale: {key_info.name}")
    table.add_column("Degree", style="cyan")
    table.add_column("Note", style="green")
    table.add_column("Code", style="yellow")
    table.add_column("Roman", style="yellow")
    table.add_column("Name", style="magenta")
    table.add_column("Step", style="dim")

    for degree, note in zip(get_scale_degrees(), get_scale_notes(key_info)):
        table.add_row(
            str(degree.degree),
            note,
            degree.short,
            degree.roman,
            degree.english_full,
            degree.interval,
        )

    console.print(table)


def _show_labels_table(note_labels):
    """Display note labels in a table."""
    from .core import midi_to_note_name_with_octave

    table = Table(title="Note Labels")
    table.add_column("Pitch", style="cyan")
    table.add_column("Note", style="green")
    table.add_column("Label", style="magenta")

    for note, text in note_labels:
        table.add_row(str(note.pitch), midi_to_note_name_with_octave(note.pitch), text)

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
