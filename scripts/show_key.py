#!/usr/bin/env python3
"""
scripts/show_key.py - Print what the visualizer would draw for a configuration.

Shows the active notes, the circle-of-fifths binding with quality arcs and a
text fretboard. With --find, runs the chord/scale finder on the given notes
instead.

Examples:
    python scripts/show_key.py --tonic A --view scale --mode minor
    python scripts/show_key.py --tonic G --chord 7 --inversion 1 --instrument bass
    python scripts/show_key.py --find chord C E G Bb
"""

import argparse
import logging
import os
import sys

# Ensure the package is importable when run from a checkout
_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from fretwheel.constants import (
    ACCIDENTAL_MODES,
    BASS_TUNING_PRESETS,
    CHORD_TYPES,
    FINDER_MODES,
    FRET_COUNT,
    GUITAR_TUNING_PRESETS,
    INSTRUMENTS,
    MAX_INVERSION,
    SCALE_MODES,
)
from fretwheel.fretboard import classify_fret_note, note_grid
from fretwheel.pipeline import MusicConfig, compute_display_data, find_in_selection

_CELL_MARKS = {"root": "*", "bass": "+", "active": "o"}


def print_circle(data) -> None:
    print("\n── Circle of Fifths ────────────────────────────────────────────────")
    print(f"   {'Slot':>4}  {'Note':<4}  {'Deg':>3}  {'Roman':<6}  {'Quality':<11}  Triad")
    for pos in data.circle:
        flag = "*" if pos.is_tonic else ("o" if pos.is_active else " ")
        if pos.degree:
            d = pos.degree
            triad = " ".join(pos.triad)
            print(f" {flag} {pos.index:>4}  {pos.note:<4}  {d.degree:>3}  {d.roman:<6}  {d.quality:<11}  {triad}")
        else:
            print(f" {flag} {pos.index:>4}  {pos.note:<4}")
    print("   Arcs:")
    for arc in data.arcs:
        print(f"     {arc.quality:<5} {arc.start:>2} → {arc.end:<2}")


def print_fretboard(data, tonic: str) -> None:
    print("\n── Fretboard ───────────────────────────────────────────────────────")
    print("   (* root, + bass, o active)")
    grid = note_grid(data.fretboard, len(data.tuning))
    header = "".join(f"{f:>4}" for f in range(FRET_COUNT + 1))
    print(f"   {'':<4}{header}")
    # High string on top, as the fretboard is drawn.
    for string in reversed(range(len(grid))):
        cells = []
        for n in grid[string]:
            if n is None:
                cells.append(f"{'x':>4}")
                continue
            state = classify_fret_note(n, data.active_notes, tonic, data.bass_note)
            cells.append(f"{n.note + _CELL_MARKS.get(state, ''):>4}")
        open_note = grid[string][0].full_note if grid[string][0] else "?"
        print(f"   {open_note:<4}{''.join(cells)}")
    print("────────────────────────────────────────────────────────────────────\n")


def main():
    mode_values = [v for v, _ in SCALE_MODES]
    chord_values = [v for v, _ in CHORD_TYPES]
    presets = sorted(set(GUITAR_TUNING_PRESETS) | set(BASS_TUNING_PRESETS))

    parser = argparse.ArgumentParser(description="Show circle-of-fifths and fretboard data.")
    parser.add_argument("--tonic", default="C", help="Tonic / chord root (default: C)")
    parser.add_argument("--view", choices=["scale", "chord"], default="chord")
    parser.add_argument("--mode", choices=mode_values, default="major")
    parser.add_argument("--chord", choices=chord_values, default="M", dest="chord_type")
    parser.add_argument("--inversion", type=int, choices=range(MAX_INVERSION + 1), default=0)
    parser.add_argument("--accidentals", choices=ACCIDENTAL_MODES, default="flats")
    parser.add_argument("--instrument", choices=INSTRUMENTS, default="guitar")
    parser.add_argument("--tuning", choices=presets + ["custom"], default=None,
                        help="Tuning preset (default: the instrument's standard)")
    parser.add_argument("--strings", nargs="+", metavar="NOTE+OCT",
                        help="Custom tuning low to high, e.g. D2 A2 D3 G3 B3 E4")
    parser.add_argument("--find", nargs="+", metavar="ARG",
                        help="Finder: 'chord' or 'scale' followed by notes")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s - %(levelname)s - %(message)s")

    if args.find:
        finder_mode, notes = args.find[0], args.find[1:]
        if finder_mode not in FINDER_MODES:
            parser.error(f"--find expects one of {', '.join(FINDER_MODES)} first")
        results = find_in_selection(finder_mode, notes)
        print(f"[finder] {finder_mode} for {' '.join(notes)}:")
        for i, name in enumerate(results, 1):
            print(f"   {i}. {name}")
        if not results:
            print("   (no match)")
        return

    custom = None
    tuning = args.tuning
    if args.strings:
        custom = [(s.rstrip("0123456789-"), int(s[len(s.rstrip("0123456789-")):] or 0))
                  for s in args.strings]
        tuning = "custom"
    if tuning is None:
        tuning = "standard" if args.instrument == "guitar" else "standard4"

    config = MusicConfig(
        instrument=args.instrument,
        tonic=args.tonic,
        view_mode=args.view,
        mode=args.mode,
        chord_type=args.chord_type,
        inversion=args.inversion,
        accidental_mode=args.accidentals,
        tuning_preset=tuning,
        custom_tuning=custom,
    )
    data = compute_display_data(config)

    print(f"[config] {args.instrument}, {args.view} view, tonic {args.tonic}")
    print(f"   Active notes : {' '.join(data.active_notes) or '(none)'}")
    print(f"   Bass note    : {data.bass_note}")
    print_circle(data)
    print_fretboard(data, args.tonic)


if __name__ == "__main__":
    main()
