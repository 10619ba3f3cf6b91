import unittest

from meantonal.errors import MidiRangeError
from meantonal.theory.interval import Interval
from meantonal.theory.pitch import Axis, Pitch
from meantonal.theory.tonality import TonalContext
from meantonal.theory.tuning import TuningMap


def spn(*names):
    return [Pitch.from_spn(n) for n in names]


class PitchConstructionTests(unittest.TestCase):
    def test_from_spn(self) -> None:
        cases = {
            "C4": (25, 10),
            "C-1": (0, 0),
            "F##4": (29, 9),
            "Fx4": (29, 9),
            "Eb4": (26, 11),
            "Ew4": (25, 12),
        }
        for name, (w, h) in cases.items():
            p = Pitch.from_spn(name)
            self.assertEqual((p.w, p.h), (w, h), name)

    def test_from_chroma(self) -> None:
        self.assertEqual(Pitch.from_chroma(0, 4), Pitch(25, 10))
        self.assertEqual(Pitch.from_chroma(6, 4), Pitch(28, 10))
        self.assertEqual(Pitch.from_chroma(-3, 4), Pitch.from_spn("Eb4"))
        self.assertEqual(Pitch.from_chroma(20, 4).octave, 4)


class PitchAccessorTests(unittest.TestCase):
    def test_chroma(self) -> None:
        self.assertEqual(Pitch.from_spn("C4").chroma, 0)
        self.assertEqual(Pitch.from_spn("Eb4").chroma, -3)
        self.assertEqual(Pitch.from_spn("F#4").chroma, 6)

    def test_letter_and_accidental(self) -> None:
        expected = {"C4": 0, "F#4": 1, "E#4": 1, "F4": 0, "B4": 0, "Bb4": -1, "Fb4": -1, "Fx4": 2}
        for name, acc in expected.items():
            p = Pitch.from_spn(name)
            self.assertEqual(p.accidental, acc, name)
            self.assertEqual(p.letter, name[0])

    def test_octave(self) -> None:
        expected = {"C4": 4, "B4": 4, "C3": 3, "B3": 3, "C-1": -1, "B-1": -1, "Cb4": 4, "B#3": 3}
        for name, octave in expected.items():
            self.assertEqual(Pitch.from_spn(name).octave, octave, name)

    def test_midi(self) -> None:
        self.assertEqual(Pitch.from_spn("C-1").midi, 0)
        self.assertEqual(Pitch.from_spn("C4").midi, 60)
        self.assertEqual(Pitch.from_spn("A4").midi, 69)
        self.assertEqual(Pitch.from_spn("G9").midi, 127)

    def test_midi_out_of_range_raises_on_access(self) -> None:
        p = Pitch.from_spn("Cb-1")
        with self.assertRaises(MidiRangeError) as ctx:
            p.midi
        self.assertEqual(ctx.exception.value, -1)
        with self.assertRaises(MidiRangeError):
            Pitch.from_spn("G#9").midi

    def test_pitch_classes(self) -> None:
        p = Pitch.from_spn("Db4")
        self.assertEqual(p.pc7, 1)
        self.assertEqual(p.pc12, 1)
        self.assertEqual(Pitch.from_spn("B#3").pc12, 0)

    def test_spn_property(self) -> None:
        self.assertEqual(Pitch.from_spn("Gbbbb7").spn, "Gbbbb7")
        self.assertEqual(str(Pitch(25, 10)), "C4")


class PitchOperationTests(unittest.TestCase):
    def test_equality_keeps_spelling(self) -> None:
        cs, db = spn("C#4", "Db4")
        self.assertFalse(cs.is_equal(db))
        self.assertNotEqual(cs, db)
        self.assertTrue(cs.is_equal(Pitch.from_spn("C#4")))

    def test_is_enharmonic(self) -> None:
        cs, db = spn("C#4", "Db4")
        self.assertTrue(cs.is_enharmonic(db))
        self.assertFalse(cs.is_enharmonic(db, 31))
        self.assertTrue(cs.is_enharmonic(cs, 31))

    def test_interval_antisymmetry(self) -> None:
        for a, b in [("C4", "E4"), ("F#3", "Bb5"), ("Gx2", "Cbb6")]:
            p, q = spn(a, b)
            self.assertEqual(Interval.between(p, q).negative, Interval.between(q, p))

    def test_transpose_round_trip(self) -> None:
        p = Pitch.from_spn("Eb4")
        for name in ["P5", "m3", "-AA4", "M17"]:
            m = Interval.from_name(name)
            moved = p.transpose_real(m)
            self.assertEqual(moved.interval_to(moved), Interval(0, 0))
            self.assertEqual(moved.transpose_real(m.negative), p)

    def test_transpose_real(self) -> None:
        self.assertEqual(Pitch.from_spn("C4").transpose_real(Interval.from_name("P5")).spn, "G4")
        self.assertEqual(Pitch.from_spn("E4").transpose_real(Interval.from_name("-m3")).spn, "C#4")

    def test_invert(self) -> None:
        axis = Axis.from_spn("C4", "G4")
        self.assertEqual(Pitch.from_spn("C4").invert(axis).spn, "G4")
        self.assertEqual(Pitch.from_spn("E4").invert(axis).spn, "Eb4")
        self.assertEqual(Pitch.from_spn("D4").invert(axis).spn, "F4")

    def test_steps_to(self) -> None:
        c4, e4 = spn("C4", "E4")
        self.assertEqual(c4.steps_to(e4), 2)
        self.assertEqual(e4.steps_to(c4), -2)


class PitchSearchTests(unittest.TestCase):
    def test_highest_and_lowest(self) -> None:
        pitches = spn("C4", "G4", "E4")
        self.assertEqual(Pitch.highest(pitches).spn, "G4")
        self.assertEqual(Pitch.lowest(pitches).spn, "C4")

    def test_ties_prefer_fewer_steps(self) -> None:
        self.assertEqual(Pitch.highest(spn("Db4", "C#4")).spn, "C#4")
        self.assertEqual(Pitch.lowest(spn("Db4", "C#4", "E4")).spn, "C#4")

    def test_tuning_decides_enharmonics(self) -> None:
        edo31 = TuningMap.from_edo(31)
        self.assertEqual(Pitch.highest(spn("C#4", "Db4"), edo31).spn, "Db4")
        self.assertEqual(Pitch.lowest(spn("Db4", "C#4"), edo31).spn, "C#4")

    def test_nearest(self) -> None:
        c4 = Pitch.from_spn("C4")
        self.assertEqual(c4.nearest(spn("G4", "D4", "A3")).spn, "D4")
        self.assertEqual(c4.nearest(spn("F5", "G3")).spn, "G3")

    def test_nearest_tie_prefers_fewer_steps(self) -> None:
        c4 = Pitch.from_spn("C4")
        self.assertEqual(c4.nearest(spn("A#3", "D4")).spn, "D4")

    def test_empty_candidates(self) -> None:
        with self.assertRaises(ValueError):
            Pitch.highest([])
        with self.assertRaises(ValueError):
            Pitch.from_spn("C4").nearest([])


class PitchRangeTests(unittest.TestCase):
    def test_diatonic_range_c_major(self) -> None:
        context = TonalContext(0, 1)
        result = [p.spn for p in Pitch.range.diatonic(*spn("C4", "C5"), context)]
        self.assertEqual(result, ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5"])

    def test_diatonic_range_d_major(self) -> None:
        context = TonalContext.from_strings("D", "major")
        result = [p.spn for p in Pitch.range.diatonic(*spn("D4", "D5"), context)]
        self.assertEqual(result, ["D4", "E4", "F#4", "G4", "A4", "B4", "C#5", "D5"])

    def test_diatonic_range_snaps_start(self) -> None:
        context = TonalContext(0, 1)
        result = [p.spn for p in Pitch.range.diatonic(*spn("C#4", "E4"), context)]
        self.assertEqual(result, ["C4", "D4", "E4"])

    def test_chromatic_range(self) -> None:
        context = TonalContext(0, 1)
        result = [p.spn for p in Pitch.range.chromatic(*spn("C4", "E5"), context)]
        self.assertEqual(
            result,
            [
                "C4", "Db4", "C#4", "D4", "Eb4", "D#4", "E4", "F4", "Gb4", "F#4",
                "G4", "Ab4", "G#4", "A4", "Bb4", "A#4", "B4", "C5", "Db5", "C#5",
                "D5", "Eb5", "D#5", "E5",
            ],
        )
        self.assertNotIn("E#4", result)
        self.assertNotIn("Fb4", result)
        self.assertEqual(len(result), len(set(result)))

    def test_chromatic_range_e_flat_major(self) -> None:
        context = TonalContext.from_strings("Eb", "major")
        result = [p.spn for p in Pitch.range.chromatic(*spn("Eb4", "Eb5"), context)]
        self.assertEqual(
            result,
            [
                "Eb4", "Fb4", "E4", "F4", "Gb4", "F#4", "G4", "Ab4", "Bbb4",
                "A4", "Bb4", "Cb5", "B4", "C5", "Db5", "C#5", "D5", "Eb5",
            ],
        )
        # mi degrees are D and G: spellings across those half steps never appear
        for name in ["D#4", "Abb4", "G#4"]:
            self.assertNotIn(name, result)

    def test_chromatic_range_starting_mid_window(self) -> None:
        context = TonalContext(0, 1)
        result = [p.spn for p in Pitch.range.chromatic(*spn("D4", "A4"), context)]
        self.assertEqual(result, ["D4", "Eb4", "D#4", "E4", "F4", "Gb4", "F#4", "G4", "Ab4", "G#4", "A4"])

    def test_chromatic_range_skips_spellings_below_start(self) -> None:
        context = TonalContext(0, 1)
        result = [p.spn for p in Pitch.range.chromatic(*spn("Db4", "G4"), context)]
        self.assertEqual(result, ["Db4", "D4", "Eb4", "D#4", "E4", "F4", "Gb4", "F#4", "G4"])
        self.assertNotIn("C#4", result)

    def test_ranges_are_restartable(self) -> None:
        context = TonalContext(0, 1)
        start, end = spn("C4", "G4")
        first = list(Pitch.range.chromatic(start, end, context))
        second = list(Pitch.range.chromatic(start, end, context))
        self.assertEqual(first, second)
        gen = Pitch.range.diatonic(start, end, context)
        self.assertEqual(next(gen).spn, "C4")
        self.assertEqual(next(gen).spn, "D4")


if __name__ == "__main__":
    unittest.main()
