"""Command-line interface for Chord Voicer.

Provides commands for:
- voice: Smooth voicings for a chord progression (table, JSON, MIDI, WAV)
- notes: Show how a single chord symbol resolves to notes
- qualities: List the chord quality table
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import InvalidNoteName
from .core.constants import DEFAULT_OCTAVE, DEFAULT_TEMPO, TEMPO_MIN, TEMPO_MAX
from .theory import (
    CHORD_QUALITIES,
    VoicingType,
    VoiceLeader,
    generate_chord_notes,
    parse_chord_symbol,
)

app = typer.Typer(
    name="chord-voicer",
    help="Chord symbol to keyboard voicing engine",
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


@app.command()
def voice(
    chords: List[str] = typer.Argument(..., help="Chord symbols in order (e.g. C Am F G)"),
    voicing_type: VoicingType = typer.Option(
        VoicingType.CLOSE, "--type", "-t", help="Voicing style"
    ),
    midi_path: Optional[Path] = typer.Option(
        None, "--midi", help="Write the progression to a MIDI file"
    ),
    wav_path: Optional[Path] = typer.Option(
        None, "--wav", help="Render the progression to a WAV file"
    ),
    tempo: int = typer.Option(
        DEFAULT_TEMPO, "--tempo", min=TEMPO_MIN, max=TEMPO_MAX, help="Playback tempo in BPM"
    ),
    volume: float = typer.Option(
        -24.0, "--volume", help="Audio output gain in dB (negative values attenuate)"
    ),
    roll: bool = typer.Option(False, "--roll", help="Show a piano-roll grid"),
    stats: bool = typer.Option(False, "--stats", help="Show smoothing statistics"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Generate smoothly connected voicings for a chord progression.

    Examples:
        chord-voicer voice C Am F G
        chord-voicer voice Dm7 G7 Cmaj7 --type drop2 --midi out/ii-V-I.mid
    """
    from .output import MIDIExporter, AudioRenderer, PianoRoll, voicings_to_dict

    _setup_logging(verbose)

    try:
        voicings, smoothing_stats = VoiceLeader().smooth(chords, voicing_type, return_stats=True)
    except InvalidNoteName as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data={
            "type": voicing_type.value,
            "voicings": voicings_to_dict(voicings, chords),
        })
    else:
        _show_voicings_table(chords, voicings)
        if roll:
            _show_piano_roll(PianoRoll(), voicings)
        if stats:
            console.print("\n[bold]Smoothing:[/bold]")
            console.print(f"  Leaps reduced: {smoothing_stats.leaps_reduced}/{smoothing_stats.leaps_found}")
            console.print(f"  Parallels fixed: {smoothing_stats.parallels_fixed}/{smoothing_stats.parallels_found}")

    if midi_path:
        MIDIExporter(tempo=tempo).export(voicings, str(midi_path))
        if not json_output:
            console.print(f"[green]MIDI written to {midi_path}[/green]")

    if wav_path:
        AudioRenderer(tempo=tempo, volume_db=volume).write(voicings, str(wav_path))
        if not json_output:
            console.print(f"[green]Audio written to {wav_path}[/green]")


@app.command()
def notes(
    chord: str = typer.Argument(..., help="Chord symbol (e.g. F#m7)"),
    octave: int = typer.Option(DEFAULT_OCTAVE, "--octave", "-o", help="Reference octave of the root"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Show how a chord symbol is parsed and resolved to notes."""
    _setup_logging(verbose)

    parsed = parse_chord_symbol(chord)

    try:
        resolved = generate_chord_notes(parsed, octave)
    except InvalidNoteName as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold blue]{chord}[/bold blue]")
    console.print(f"  Root: {parsed.root}")
    console.print(f"  Quality: {parsed.quality}")
    if parsed.extensions:
        console.print(f"  Extensions: {', '.join(str(e) for e in parsed.extensions)}")

    table = Table(title="Chord Notes")
    table.add_column("Note", style="cyan")
    table.add_column("Semitone", style="green")
    table.add_column("Frequency", style="magenta")
    for note in resolved:
        table.add_row(note.label, str(note.semitone), f"{note.frequency:.2f} Hz")
    console.print(table)


@app.command()
def qualities():
    """List supported chord qualities and their intervals."""
    table = Table(title="Chord Qualities")
    table.add_column("Quality", style="cyan")
    table.add_column("Intervals", style="green")
    for name, intervals in CHORD_QUALITIES.items():
        table.add_row(name, " ".join(str(i) for i in intervals))
    console.print(table)


def _show_voicings_table(chords, voicings):
    """Display voicings in a table."""
    table = Table(title="Voicings")
    table.add_column("#", style="dim")
    table.add_column("Chord", style="cyan")
    table.add_column("Notes (bass → top)", style="green")
    table.add_column("Frequencies (Hz)", style="magenta")

    for chord, voicing in zip(chords, voicings):
        table.add_row(
            str(voicing.position),
            chord,
            " ".join(voicing.labels),
            " ".join(f"{f:.1f}" for f in voicing.frequencies),
        )

    console.print(table)


def _show_piano_roll(piano_roll, voicings):
    """Display the piano-roll grid, trimmed to rows that sound."""
    grid = piano_roll.grid(voicings)
    labels = piano_roll.row_labels

    table = Table(title="Piano Roll")
    table.add_column("Key", style="cyan")
    for voicing in voicings:
        table.add_column(str(voicing.position), justify="center")

    for row in piano_roll.active_rows(voicings):
        cells = [str(v) if v else "·" for v in grid[row]]
        table.add_row(labels[row], *cells)

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
