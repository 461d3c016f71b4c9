import io
import os
import unittest
from contextlib import redirect_stdout
from dataclasses import FrozenInstanceError
from unittest.mock import patch

from game import (
    CARDINAL_ANGLES,
    COLS,
    COMPLETION_THRESHOLD,
    REQUIRED_TILES,
    ROWS,
    Phase,
    PuzzleSession,
    SessionStatus,
    rotate,
)
from helpers import first_required, make_tiles


def _almost_complete_session():
    # Seven required tiles in place; (2, 0) sits one quarter turn short of 90.
    rotations = first_required(COMPLETION_THRESHOLD - 1)
    rotations[(2, 0)] = 0
    return PuzzleSession.from_tiles(make_tiles(rotations=rotations))


class TestRotation(unittest.TestCase):
    def test_given_session_when_rotating_then_only_target_changes(self):
        session = PuzzleSession(seed=1, quantize=True)
        before = session.tiles
        rotate(session, 6)
        after = session.tiles
        self.assertEqual(after[6].rotation, (before[6].rotation + 90) % 360)
        self.assertTrue(after[6].selected)
        for b, a in zip(before, after):
            self.assertEqual(a.position, b.position)
            self.assertEqual(a.wire_type, b.wire_type)
            if a.id != 6:
                self.assertEqual(a.rotation, b.rotation)
                self.assertFalse(a.selected)

    def test_given_rotations_when_counting_attempts_then_one_per_rotation(self):
        session = PuzzleSession(seed=2)
        for i, tile_id in enumerate([0, 5, 5, 15], start=1):
            session.rotate(tile_id)
            self.assertEqual(session.attempts, i)

    def test_given_unknown_id_when_rotating_then_nothing_changes(self):
        session = PuzzleSession(seed=3)
        session.rotate(4)
        before = session.snapshot()
        status = session.rotate(ROWS * COLS)
        session.rotate(-1)
        after = session.snapshot()
        self.assertEqual(after, before)
        self.assertEqual(session.attempts, 1)
        self.assertIs(status, SessionStatus.IN_PROGRESS)
        self.assertTrue(session.tiles[4].selected)

    def test_given_quantized_tile_when_rotating_four_times_then_back_to_start(self):
        session = PuzzleSession(seed=4, quantize=True)
        start = session.tiles[9].rotation
        for _ in range(4):
            session.rotate(9)
        self.assertEqual(session.tiles[9].rotation, start)

    def test_given_continuous_tile_when_rotating_then_stays_in_range_and_cycles(self):
        session = PuzzleSession(seed=5)
        start = session.tiles[3].rotation
        for _ in range(4):
            session.rotate(3)
            r = session.tiles[3].rotation
            self.assertGreaterEqual(r, 0)
            self.assertLess(r, 360)
        self.assertAlmostEqual(session.tiles[3].rotation, start, places=6)

    def test_given_selection_when_rotating_other_tile_then_selection_moves(self):
        session = PuzzleSession(seed=6)
        session.rotate(1)
        session.rotate(2)
        self.assertEqual([t.id for t in session.tiles if t.selected], [2])


class TestPuzzleSession(unittest.TestCase):
    def test_given_new_session_when_created_then_playing_with_full_grid(self):
        session = PuzzleSession(seed=7)
        self.assertEqual(len(session.tiles), ROWS * COLS)
        self.assertEqual(session.attempts, 0)
        self.assertIs(session.phase, Phase.PLAYING)
        self.assertIs(session.status, SessionStatus.IN_PROGRESS)
        self.assertFalse(any(t.selected for t in session.tiles))

    def test_given_same_seed_when_creating_sessions_then_reproducible(self):
        a = PuzzleSession(seed=123)
        b = PuzzleSession(seed=123)
        self.assertEqual(a.tiles, b.tiles)
        a.reset()
        b.reset()
        self.assertEqual(a.tiles, b.tiles)

    def test_given_quantized_session_when_created_then_every_tile_reachable(self):
        session = PuzzleSession(seed=8, quantize=True)
        for t in session.tiles:
            self.assertIn(t.rotation, CARDINAL_ANGLES)

    def test_given_eight_targets_set_when_building_then_complete(self):
        session = PuzzleSession.from_tiles(make_tiles(rotations=first_required(8)))
        self.assertTrue(session.is_complete())
        self.assertIs(session.status, SessionStatus.COMPLETE)
        self.assertIs(session.phase, Phase.COMPLETE)

    def test_given_seven_targets_set_when_building_then_in_progress(self):
        session = PuzzleSession.from_tiles(make_tiles(rotations=first_required(7)))
        self.assertFalse(session.is_complete())
        self.assertIs(session.phase, Phase.PLAYING)

    def test_given_almost_solved_when_final_rotation_then_completes_once(self):
        session = _almost_complete_session()
        self.assertEqual(session.correct_count(), 7)
        status = session.rotate(8)  # (2, 0): 0 -> 90
        self.assertIs(status, SessionStatus.COMPLETE)
        self.assertIs(session.phase, Phase.COMPLETE)
        self.assertTrue(session.just_completed)
        session.rotate(15)
        self.assertFalse(session.just_completed)
        self.assertIs(session.phase, Phase.COMPLETE)

    def test_given_complete_session_when_rotating_away_then_status_drops_but_phase_stays(self):
        session = PuzzleSession.from_tiles(make_tiles(rotations=first_required(8)))
        session.rotate(1)  # (0, 1) leaves its target
        self.assertIs(session.status, SessionStatus.IN_PROGRESS)
        self.assertIs(session.phase, Phase.COMPLETE)
        self.assertEqual(session.attempts, 1)

    def test_given_complete_session_when_reset_then_in_progress_with_zero_attempts(self):
        session = _almost_complete_session()
        session.rotate(8)
        self.assertIs(session.status, SessionStatus.COMPLETE)
        status = session.reset()
        self.assertIs(status, SessionStatus.IN_PROGRESS)
        self.assertIs(session.status, SessionStatus.IN_PROGRESS)
        self.assertEqual(session.attempts, 0)
        self.assertIs(session.phase, Phase.PLAYING)
        self.assertFalse(session.just_completed)
        self.assertFalse(any(t.selected for t in session.tiles))
        self.assertEqual(len(session.tiles), ROWS * COLS)
        self.assertEqual({t.position for t in session.tiles}, {(r, c) for r in range(ROWS) for c in range(COLS)})

    def test_given_seed_when_resetting_then_deal_matches_fresh_session(self):
        session = PuzzleSession(seed=1)
        session.rotate(0)
        session.reset(seed=77)
        self.assertEqual(session.tiles, PuzzleSession(seed=77).tiles)

    def test_given_quantized_seeds_when_dealing_then_never_starts_complete(self):
        for seed in range(200):
            session = PuzzleSession(seed=seed, quantize=True)
            self.assertIs(session.status, SessionStatus.IN_PROGRESS)

    def test_given_path_mode_when_top_row_wired_then_complete(self):
        rotations = {(0, 0): 0, (0, 1): 0, (0, 2): 270, (0, 3): 0}
        session = PuzzleSession.from_tiles(make_tiles(rotations=rotations), mode="path")
        self.assertIs(session.status, SessionStatus.IN_PROGRESS)
        session.rotate(2)  # 270 -> 0, straight West-East again
        self.assertIs(session.status, SessionStatus.COMPLETE)
        self.assertTrue(session.just_completed)

    def test_given_snapshot_when_mutating_session_then_snapshot_unchanged(self):
        session = PuzzleSession(seed=9)
        snap = session.snapshot()
        session.rotate(0)
        self.assertEqual(snap.attempts, 0)
        self.assertNotEqual(snap.tiles[0].rotation, session.tiles[0].rotation)
        with self.assertRaises(FrozenInstanceError):
            snap.attempts = 5  # type: ignore[misc]
        with self.assertRaises(FrozenInstanceError):
            snap.tiles[0].rotation = 0  # type: ignore[misc]

    def test_given_bad_inputs_when_building_session_then_value_error(self):
        with self.assertRaises(ValueError):
            PuzzleSession(mode="nope")
        with self.assertRaises(ValueError):
            PuzzleSession.from_tiles(make_tiles(), attempts=-1)
        with self.assertRaises(ValueError):
            PuzzleSession.from_tiles(make_tiles(), phase=Phase.SETUP)

    def test_given_debug_flag_when_rotating_then_trace_printed(self):
        session = PuzzleSession(seed=10)
        buf = io.StringIO()
        with patch.dict(os.environ, {"LIGHTUP_DEBUG": "1"}), redirect_stdout(buf):
            session.rotate(0)
            session.rotate(99)
        out = buf.getvalue()
        self.assertIn("[rotate] tile 0", out)
        self.assertIn("[rotate] ignored unknown tile id 99", out)

    def test_given_completing_rotation_when_rotating_again_through_controller_then_flag_cleared(self):
        session = _almost_complete_session()
        rotate(session, 8)
        self.assertTrue(session.just_completed)
        rotate(session, 15)
        self.assertFalse(session.just_completed)
        rotate(session, 8)
        rotate(session, 99)
        self.assertFalse(session.just_completed)

    def test_given_out_of_range_threshold_when_building_session_then_value_error(self):
        for bad in (0, -1, len(REQUIRED_TILES) + 1, 2.5, True):
            with self.assertRaises(ValueError):
                PuzzleSession(seed=1, threshold=bad)
            with self.assertRaises(ValueError):
                PuzzleSession.from_tiles(make_tiles(), threshold=bad)
        self.assertEqual(PuzzleSession(seed=1, threshold=1).threshold, 1)

    def test_given_float_id_equal_to_tile_when_rotating_then_rotation_fully_applied(self):
        session = PuzzleSession(seed=11, quantize=True)
        before = session.tiles[1].rotation
        session.rotate(1.0)
        self.assertEqual(session.attempts, 1)
        self.assertEqual(session.tiles[1].rotation, (before + 90) % 360)
        self.assertEqual([t.id for t in session.tiles if t.selected], [1])
        buf = io.StringIO()
        with patch.dict(os.environ, {"LIGHTUP_DEBUG": "1"}), redirect_stdout(buf):
            session.rotate(2.0)
        self.assertIn("[rotate] tile 2 ->", buf.getvalue())

    def test_given_required_table_when_inspecting_then_ten_entries_and_threshold_eight(self):
        self.assertEqual(len(REQUIRED_TILES), 10)
        self.assertEqual(COMPLETION_THRESHOLD, 8)
        self.assertTrue(set(REQUIRED_TILES.values()) <= set(CARDINAL_ANGLES))


if __name__ == "__main__":
    unittest.main(verbosity=2)
