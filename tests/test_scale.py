"""
Tests for Scale and ScaleRange.

Tests cover:
- Construction and span measures
- Classification (direction, chromatic, diatonic)
- Degree access, spelling and search
- Equivalence relations, rotations and containment
- Derived scales (mode, reversed, with_root, from_notes)
"""

import pytest

from chuk_mcp_scales.core import (
    Accidental,
    Interval,
    Note,
    Pitch,
    Scale,
    ScaleConstructionError,
    ScaleRange,
)

MAJOR_STEPS = [200, 200, 100, 200, 200, 200, 100]
MINOR_STEPS = [200, 100, 200, 200, 100, 200, 200]


def names(scale: Scale) -> list[str]:
    return [str(note) for note in scale.notes()]


class TestConstruction:
    """Building scales."""

    def test_accepts_intervals_and_cents(self) -> None:
        scale = Scale([Interval.M2, 100])
        assert scale.intervals == (Interval.M2, Interval.m2)

    def test_rejects_none(self) -> None:
        with pytest.raises(ScaleConstructionError):
            Scale(None)

    def test_rejects_empty(self) -> None:
        with pytest.raises(ScaleConstructionError):
            Scale([])

    def test_rejects_none_element(self) -> None:
        with pytest.raises(ScaleConstructionError, match="index 1"):
            Scale([200, None, 100])

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Scale([])

    def test_template(self) -> None:
        """A scale without a root is a template."""
        assert Scale(MAJOR_STEPS).is_template
        assert not Scale(MAJOR_STEPS, Note.parse("C4")).is_template

    def test_symbol_is_assignable(self, c_major: Scale) -> None:
        c_major.symbol = "Ionian"
        assert str(c_major) == "C Ionian"

    def test_str(self) -> None:
        assert str(Scale(MAJOR_STEPS, Note.parse("F#4"), "Major")) == "F# Major"
        assert str(Scale(MAJOR_STEPS, symbol="Major")) == "Major"

    def test_adjustments(self) -> None:
        assert Scale([150, 200]).adjustments == (-50, 0)


class TestSpan:
    """Size and width measures."""

    def test_size_counts_closing_note(self, c_major: Scale) -> None:
        assert c_major.size() == 8
        assert Scale([700]).size() == 2

    def test_major_spans_an_octave(self, c_major: Scale) -> None:
        assert c_major.cents == 1200
        assert c_major.semitones == 12
        assert c_major.length() == 12

    def test_span_includes_starting_note(self) -> None:
        """Width runs from the lowest to the highest running total."""
        zigzag = Scale([200, -100])
        assert zigzag.cents == 200
        below = Scale([-300, 100])
        assert below.cents == 300

    def test_rounding_before_and_after_summing(self) -> None:
        """length() rounds each interval; semitones rounds the total."""
        scale = Scale([150, 150])
        assert scale.cents == 300
        assert scale.semitones == 3
        assert scale.length() == 4


class TestClassification:
    """Direction, chromatic and diatonic checks."""

    def test_direction(self, c_major: Scale) -> None:
        assert c_major.is_ascending()
        assert not c_major.is_descending()
        assert c_major.reversed().is_descending()
        assert not c_major.reversed().is_ascending()

    def test_mixed_direction(self) -> None:
        zigzag = Scale([200, -100])
        assert not zigzag.is_ascending()
        assert not zigzag.is_descending()

    def test_chromatic(self) -> None:
        assert Scale([100] * 12).is_chromatic()
        assert Scale([-100] * 12).is_chromatic()

    def test_not_chromatic(self, c_major: Scale) -> None:
        assert not Scale([100] * 11).is_chromatic()
        assert not Scale([100] * 11 + [-100]).is_chromatic()
        assert not Scale([200] * 12).is_chromatic()
        assert not c_major.is_chromatic()

    def test_diatonic_steps(self, c_major: Scale, a_minor: Scale) -> None:
        assert c_major.has_diatonic_steps()
        assert a_minor.has_diatonic_steps()
        assert Scale([-i for i in MAJOR_STEPS]).has_diatonic_steps()

    def test_not_diatonic_steps(self) -> None:
        assert not Scale([200] * 6).has_diatonic_steps()
        assert not Scale([100] * 12).has_diatonic_steps()
        assert not Scale([200, 100, 100, 200, 200, 200, 200]).has_diatonic_steps()
        assert not Scale([200, 200, -100, 200, 200, 200, 100]).has_diatonic_steps()
        assert not Scale([200, 200, 300, 200, 300]).has_diatonic_steps()

    def test_is_diatonic_skips_seven_interval_scales(self, c_major: Scale) -> None:
        """The step check only runs when the interval count is not 7."""
        assert not c_major.is_diatonic()
        assert Scale([200, 200, 100, 200, 200, 100]).is_diatonic()
        assert not Scale([200] * 6).is_diatonic()


class TestDegrees:
    """Degree ranges and note spelling."""

    def test_apply_out_of_range(self, c_major: Scale) -> None:
        assert c_major.apply(-1) is None
        assert c_major.apply(8) is None

    def test_apply_returns_range(self, c_major: Scale) -> None:
        scale_range = c_major.apply(5)
        assert isinstance(scale_range, ScaleRange)
        assert scale_range.scale is c_major
        assert scale_range.degree == 5
        assert scale_range.is_local()
        assert scale_range.get_fundamental() == Note.parse("A4")

    def test_apply_caches(self, c_major: Scale) -> None:
        assert c_major.apply(3) is c_major.apply(3)

    def test_template_has_no_fundamentals(self) -> None:
        template = Scale(MAJOR_STEPS)
        assert template.apply(0) is not None
        assert template.apply(0).get_fundamental() is None
        assert list(template.notes()) == []

    def test_major_notes(self, c_major: Scale) -> None:
        assert names(c_major) == ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5"]

    def test_diatonic_spelling_uses_flats_and_sharps(self) -> None:
        """Each letter appears once in a diatonic scale."""
        f_major = Scale(MAJOR_STEPS, Note.parse("F4"))
        assert names(f_major)[3] == "Bb4"
        g_major = Scale(MAJOR_STEPS, Note.parse("G4"))
        assert names(g_major) == ["G4", "A4", "B4", "C5", "D5", "E5", "F#5", "G5"]

    def test_octaveless_root(self) -> None:
        scale = Scale(MAJOR_STEPS, Note.parse("D"))
        assert names(scale) == ["D", "E", "F#", "G", "A", "B", "C#", "D"]

    def test_non_diatonic_notes(self) -> None:
        pentatonic = Scale([200, 200, 300, 200, 300], Note.parse("C4"))
        assert names(pentatonic) == ["C4", "D4", "E4", "G4", "A4", "C5"]

    def test_chromatic_fragment_spelled_by_position(self) -> None:
        """Seven half steps are not diatonic, so letters may repeat."""
        fragment = Scale([100] * 7, Note.parse("C4"))
        assert names(fragment) == ["C4", "C#4", "D4", "D#4", "E4", "F4", "F#4", "G4"]

    def test_iteration(self, c_major: Scale) -> None:
        assert list(c_major) == list(c_major.notes())
        assert len(list(c_major)) == c_major.size()


class TestScaleRange:
    """Membership tests on a single degree."""

    def test_contains(self, c_major: Scale) -> None:
        e = c_major.apply(2)
        assert e.contains(4, Pitch.E)
        assert e.contains(None, Pitch.E)
        assert not e.contains(5, Pitch.E)
        assert not e.contains(4, Pitch.E, Accidental.FLAT)

    def test_contains_enharmonic(self, c_major: Scale) -> None:
        e = c_major.apply(2)
        assert e.contains(4, Pitch.F, Accidental.FLAT)
        assert e.contains_pitch(Pitch.F, Accidental.FLAT)

    def test_contains_pitch_any_octave(self, c_major: Scale) -> None:
        c = c_major.apply(0)
        assert c.contains_pitch(Pitch.C)
        assert c.contains_pitch(Pitch.B, Accidental.SHARP)
        assert not c.contains_pitch(Pitch.D)

    def test_missing_adjustment_counts_as_zero(self, c_major: Scale) -> None:
        a = c_major.apply(5)
        assert a.contains(4, Pitch.A, None, None)
        assert not a.contains(4, Pitch.A, None, 10)

    def test_contains_note_adjustment(self, c_major: Scale) -> None:
        """Without an override the note's own adjustment is used."""
        e = c_major.apply(2)
        sharp_e = Note(Pitch.E, 4, adjustment=10)
        assert not e.contains_note(sharp_e)
        assert e.contains_note(sharp_e, None)
        assert e.contains_note(sharp_e, 0)
        assert not e.contains_note(None)

    def test_template_range_contains_nothing(self) -> None:
        template = Scale(MAJOR_STEPS)
        assert not template.apply(0).contains(4, Pitch.C)
        assert not template.apply(0).contains_pitch(Pitch.C)

    def test_range_keeps_fundamental(self, c_major: Scale) -> None:
        """A range built before a root change keeps its note."""
        tonic = c_major.apply(0)
        c_major.set_root(Note.parse("D4"))
        assert tonic.get_fundamental() == Note.parse("C4")
        assert c_major.apply(0) is not tonic
        assert c_major.apply(0).get_fundamental() == Note.parse("D4")


class TestSearch:
    """index_of and contains."""

    def test_index_of(self, c_major: Scale) -> None:
        assert c_major.index_of(4, Pitch.A) == 5
        assert c_major.index_of(None, Pitch.C) == 0
        assert c_major.index_of(5, Pitch.C) == 7

    def test_index_of_not_found_is_size(self, c_major: Scale) -> None:
        assert c_major.index_of(5, Pitch.A) == 8
        assert c_major.index_of(None, Pitch.C, Accidental.SHARP) == 8

    def test_index_of_enharmonic(self, c_major: Scale) -> None:
        assert c_major.index_of(None, Pitch.B, Accidental.SHARP) == 0

    def test_index_of_pitch_and_note(self, c_major: Scale) -> None:
        assert c_major.index_of_pitch(Pitch.B) == 6
        assert c_major.index_of_pitch(Pitch.F, Accidental.SHARP) == 8
        assert c_major.index_of_note(Note.parse("C5")) == 7
        assert c_major.index_of_note(Note.parse("G")) == 4

    def test_template_search_is_size(self) -> None:
        template = Scale(MAJOR_STEPS)
        assert template.index_of(4, Pitch.C) == template.size()
        assert template.index_of_pitch(Pitch.C) == template.size()

    def test_contains(self, c_major: Scale) -> None:
        assert Note.parse("E4") in c_major
        assert Note.parse("E") in c_major
        assert Note.parse("Eb4") not in c_major
        assert "E4" not in c_major

    def test_contains_at_degrees(self, c_major: Scale) -> None:
        e4 = Note.parse("E4")
        assert c_major.contains(e4, 2)
        assert not c_major.contains(e4, 0, 1)
        assert not c_major.contains(None)


class TestEquivalence:
    """Equality, rotation and note sequence relations."""

    def test_equal(self, c_major: Scale) -> None:
        assert c_major == Scale(MAJOR_STEPS, Note.parse("C4"))
        assert hash(c_major) == hash(Scale(MAJOR_STEPS, Note.parse("C4")))

    def test_equal_octaveless_root(self, c_major: Scale) -> None:
        assert c_major == Scale(MAJOR_STEPS, Note.parse("C"))

    def test_template_equals_any_root(self, c_major: Scale) -> None:
        assert Scale(MAJOR_STEPS) == c_major

    def test_not_equal(self, c_major: Scale) -> None:
        assert c_major != Scale(MAJOR_STEPS, Note.parse("C5"))
        assert c_major != Scale(MINOR_STEPS, Note.parse("C4"))
        assert c_major != Scale(MAJOR_STEPS, Note.parse("B#3"))

    def test_equals_ignore_pitch(self) -> None:
        c_sharp = Scale(MAJOR_STEPS, Note.parse("C#4"))
        d_flat = Scale(MAJOR_STEPS, Note.parse("Db4"))
        assert c_sharp != d_flat
        assert c_sharp.equals_ignore_pitch(d_flat)
        assert not c_sharp.equals_ignore_pitch(Scale(MAJOR_STEPS, Note.parse("Db5")))
        assert not c_sharp.equals_ignore_pitch(None)

    def test_equals_ignore_pitch_and_octave(self, c_major: Scale) -> None:
        assert c_major.equals_ignore_pitch_and_octave(Scale(MAJOR_STEPS, Note.parse("B#5")))
        assert not c_major.equals_ignore_pitch_and_octave(Scale(MAJOR_STEPS, Note.parse("D4")))
        assert not c_major.equals_ignore_pitch_and_octave(None)

    def test_has_equal_intervals(self, c_major: Scale, a_minor: Scale) -> None:
        assert c_major.has_equal_intervals(Scale(MAJOR_STEPS))
        assert not c_major.has_equal_intervals(a_minor)
        assert not c_major.has_equal_intervals(None)

    def test_interval_sequence_any_start(self, c_major: Scale, a_minor: Scale) -> None:
        """Minor is a rotation of major."""
        assert c_major.has_equal_interval_sequence(a_minor)
        assert a_minor.has_equal_interval_sequence(c_major)

    def test_interval_sequence_at_start(self, c_major: Scale, a_minor: Scale) -> None:
        assert c_major.has_equal_interval_sequence(a_minor, 5)
        assert not c_major.has_equal_interval_sequence(a_minor, 0)
        assert not c_major.has_equal_interval_sequence(a_minor, 7)
        assert not c_major.has_equal_interval_sequence(a_minor, -1)

    def test_interval_sequence_needs_equal_length(self, c_major: Scale) -> None:
        assert not c_major.has_equal_interval_sequence(Scale([200, 200]))
        assert not c_major.has_equal_interval_sequence(None)

    def test_whole_tone_is_its_own_rotation(self) -> None:
        whole_tone = Scale([200] * 6)
        assert all(whole_tone.has_equal_interval_sequence(whole_tone, i) for i in range(6))

    def test_relative_minor(self, c_major: Scale, a_minor: Scale) -> None:
        """C major and A minor share a note sequence."""
        assert c_major.has_equal_note_sequence(a_minor)
        assert c_major.has_equal_note_sequence(Scale(MINOR_STEPS, Note.parse("A2")))

    def test_not_relative(self, c_major: Scale) -> None:
        assert not c_major.has_equal_note_sequence(Scale(MINOR_STEPS, Note.parse("E4")))
        assert not c_major.has_equal_note_sequence(Scale(MINOR_STEPS))
        assert not c_major.has_equal_note_sequence(None)


class TestContainment:
    """Scale.test: one scale inside another's cycle."""

    def test_template_fragment(self, c_major: Scale) -> None:
        assert Scale([200, 200]).test(c_major)
        assert Scale([100, 200]).test(c_major)
        assert not Scale([100, 100]).test(c_major)

    def test_fragment_wraps_around(self, c_major: Scale) -> None:
        assert Scale([100, 200, 200]).test(c_major)

    def test_rooted_fragment(self, c_major: Scale) -> None:
        """A rooted scale must start at its root's degree."""
        assert Scale([200, 100], Note.parse("A4")).test(c_major)
        assert not Scale([100, 200], Note.parse("A4")).test(c_major)
        assert not Scale([200, 200], Note.parse("F#4")).test(c_major)

    def test_root_on_closing_degree_not_contained(self) -> None:
        """A root found only at the closing degree does not wrap to the start."""
        other = Scale([200, 100], Note.parse("C4"))
        assert not Scale([200], Note.parse("Eb4")).test(other)
        assert Scale([200], Note.parse("C4")).test(other)

    def test_relative_minor_contained(self, c_major: Scale, a_minor: Scale) -> None:
        assert a_minor.test(c_major)
        assert c_major.test(a_minor)

    def test_longer_scale_not_contained(self, c_major: Scale) -> None:
        assert not c_major.test(Scale([200, 200]))
        assert not c_major.test(None)


class TestRootChanges:
    """set_root and the root property."""

    def test_set_root(self, c_major: Scale) -> None:
        c_major.set_root(Note.parse("D4"))
        assert c_major.root == Note.parse("D4")
        assert names(c_major)[2] == "F#4"

    def test_root_property(self, c_major: Scale) -> None:
        c_major.root = Note.parse("F4")
        assert names(c_major)[3] == "Bb4"

    def test_clear_root(self, c_major: Scale) -> None:
        c_major.apply(0)
        c_major.set_root(None)
        assert c_major.is_template
        assert list(c_major.notes()) == []


class TestDerivedScales:
    """mode, reversed, with_root and from_notes."""

    def test_mode(self, c_major: Scale) -> None:
        aeolian = c_major.mode(5, "Aeolian")
        assert aeolian.has_equal_intervals(Scale(MINOR_STEPS))
        assert aeolian.root == Note.parse("A4")
        assert str(aeolian) == "A Aeolian"

    def test_mode_of_template(self) -> None:
        dorian = Scale(MAJOR_STEPS).mode(1)
        assert dorian.is_template
        assert [i.cents for i in dorian.intervals] == [200, 100, 200, 200, 200, 100, 200]

    def test_mode_out_of_range(self, c_major: Scale) -> None:
        with pytest.raises(ValueError):
            c_major.mode(7)
        with pytest.raises(ValueError):
            c_major.mode(-1)

    def test_reversed(self, c_major: Scale) -> None:
        down = c_major.reversed()
        assert down.root == Note.parse("C5")
        assert [i.cents for i in down.intervals] == [-100, -200, -200, -200, -100, -200, -200]
        assert names(down) == ["C5", "B4", "A4", "G4", "F4", "E4", "D4", "C4"]

    def test_with_root(self, c_major: Scale) -> None:
        g_major = c_major.with_root(Note.parse("G4"))
        assert g_major is not c_major
        assert g_major.symbol == "Major"
        assert c_major.root == Note.parse("C4")
        assert g_major.has_equal_intervals(c_major)

    def test_from_notes(self) -> None:
        notes = [Note.parse(n) for n in ["A3", "B3", "C4", "D4", "E4", "F4", "G4", "A4"]]
        scale = Scale.from_notes(*notes, symbol="Minor")
        assert [i.cents for i in scale.intervals] == MINOR_STEPS
        assert scale.root == Note.parse("A3")
        assert names(scale) == [str(n) for n in notes]

    def test_from_notes_needs_two(self) -> None:
        with pytest.raises(ScaleConstructionError):
            Scale.from_notes(Note.parse("C4"))
