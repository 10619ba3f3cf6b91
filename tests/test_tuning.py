import unittest

import numpy as np

from meantonal.errors import TuningError
from meantonal.theory.constants import EDO12, EDO19, EDO31, EDO53
from meantonal.theory.interval import Interval
from meantonal.theory.pitch import Pitch
from meantonal.theory.tuning import TuningMap, twelve_edo


class TuningMapTests(unittest.TestCase):
    def test_cents(self) -> None:
        tuning = TuningMap(700)
        self.assertAlmostEqual(tuning.to_cents(Interval.from_name("P5")), 700)
        self.assertAlmostEqual(tuning.to_cents(Interval.from_name("M3")), 400)
        self.assertAlmostEqual(tuning.to_cents(Interval.from_name("P8")), 1200)

    def test_meantone_fifth(self) -> None:
        tuning = TuningMap(696.578)
        # quarter-comma: four fifths less two octaves is a pure 5/4
        self.assertAlmostEqual(tuning.to_ratio(Interval.from_name("M3")), 1.25, places=4)
        self.assertLess(tuning.to_cents(Interval.from_name("A1")), tuning.to_cents(Interval.from_name("m2")))

    def test_hz(self) -> None:
        tuning = twelve_edo()
        self.assertAlmostEqual(tuning.to_hz(Pitch.from_spn("A4")), 440.0, places=4)
        self.assertAlmostEqual(tuning.to_hz(Pitch.from_spn("C4")), 261.6255653, places=6)
        a440 = TuningMap(700, "A4", 440.0)
        self.assertAlmostEqual(a440.to_hz(Pitch.from_spn("A5")), 880.0)

    def test_hz_array_matches_scalar(self) -> None:
        tuning = TuningMap(696.578, "A4", 440.0)
        pitches = [Pitch.from_spn(n) for n in ["C4", "Eb4", "G#2", "Fx6"]]
        expected = np.array([tuning.to_hz(p) for p in pitches])
        np.testing.assert_allclose(tuning.to_hz_array(pitches), expected)
        self.assertEqual(tuning.to_hz_array([]).shape, (0,))

    def test_to_midi(self) -> None:
        tuning = TuningMap.from_edo(12)
        self.assertEqual(tuning.to_midi(Pitch.from_spn("C4")), 60)
        self.assertEqual(tuning.to_midi(Pitch.from_spn("B#3")), 60)
        self.assertEqual(tuning.interval_steps(Interval.from_name("P5")), 7)

    def test_from_edo_midi_maps(self) -> None:
        for edo, expected in [(12, EDO12), (19, EDO19), (31, EDO31), (53, EDO53)]:
            self.assertEqual(TuningMap.from_edo(edo).midi_map, expected, edo)

    def test_from_edo_fifth(self) -> None:
        self.assertAlmostEqual(TuningMap.from_edo(12).fifth, 700)
        self.assertAlmostEqual(TuningMap.from_edo(31).fifth, 18 * 1200 / 31)

    def test_twelve_edo_is_shared(self) -> None:
        self.assertIs(twelve_edo(), twelve_edo())

    def test_errors(self) -> None:
        with self.assertRaises(TuningError):
            TuningMap.from_edo(0)
        with self.assertRaises(TuningError):
            TuningMap(700, "A4", 0)
        with self.assertRaises(TuningError):
            TuningMap(700).to_midi(Pitch.from_spn("C4"))
        with self.assertRaises(TuningError):
            TuningMap(700).interval_steps(Interval.from_name("P5"))


if __name__ == "__main__":
    unittest.main()
