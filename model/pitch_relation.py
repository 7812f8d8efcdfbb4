from __future__ import annotations
from functools import lru_cache
from music21 import pitch as m21pitch

def interval_class(pitch: int, tonic: int) -> int:
    """Pitch-class distance from the tonic, always in 0..11."""
    return (int(pitch) - int(tonic)) % 12

def is_tonic(pitch: int, tonic: int) -> bool:
    return interval_class(pitch, tonic) == 0

def is_tritone(pitch: int, tonic: int) -> bool:
    return interval_class(pitch, tonic) == 6

def is_perfect_fourth_or_fifth(pitch: int, tonic: int) -> bool:
    return interval_class(pitch, tonic) in (5, 7)

# music21 objects are mutable; only plain values leave the cache
@lru_cache(maxsize=256)
def _spelling(pitch: int) -> tuple[bool, str, str]:
    p = m21pitch.Pitch(midi=int(pitch))
    acc = p.accidental
    natural = acc is None or acc.alter == 0
    return natural, p.step, p.nameWithOctave

def is_natural_note(pitch: int) -> bool:
    """True when music21 spells the pitch without a sharp or flat (a 'white key')."""
    return _spelling(pitch)[0]

def note_label(pitch: int) -> str:
    """Default key text: 'C4'-style name on C pitches, empty elsewhere."""
    natural, step, name = _spelling(pitch)
    if natural and step == "C":
        return name
    return ""
