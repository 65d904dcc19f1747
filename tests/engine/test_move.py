import unittest

from aeroplane_chess import verify
from aeroplane_chess.operations import EndGame, Set, SetRandomInteger, SetTurn

PLAYERS = ["100", "200"]
ROLL = SetRandomInteger("die", 1, 7)
RESET = [Set("lastTwoRolls", [-1, -1]), Set("lastTwoMoves", ["", ""])]


def make_state(die, action="move", rolls=(-1, -1), moves=("", ""), **pieces):
    wire = {"die": die, "action": action}
    for letter in "RY":
        for i in range(4):
            wire[f"{letter}{i}"] = [f"H0{i}", "unstacked", "faceup"]
    wire.update(pieces)
    wire["lastTwoRolls"] = list(rolls)
    wire["lastTwoMoves"] = list(moves)
    return wire


def piece(location, stacked=False, face_down=False):
    return [
        location,
        "stacked" if stacked else "unstacked",
        "facedown" if face_down else "faceup",
    ]


def passing(action, *piece_ops):
    return [SetTurn("200"), ROLL, Set("action", action), *piece_ops, *RESET]


class TestRegularMoves(unittest.TestCase):
    def setUp(self):
        self.launched = make_state(3, R0=piece("L00"))

    def test_launch_to_track(self):
        ops = passing("move", Set("R0", piece("T21")))
        self.assertTrue(verify(PLAYERS, None, self.launched, ops, "100").accepted)

    def test_wrong_destination_rejected(self):
        for location in ("T20", "T22", "L00"):
            ops = passing("move", Set("R0", piece(location)))
            self.assertFalse(verify(PLAYERS, None, self.launched, ops, "100").accepted)

    def test_wrong_turn_rejected(self):
        ops = [SetTurn("100"), ROLL, Set("action", "move"), Set("R0", piece("T21")), *RESET]
        self.assertFalse(verify(PLAYERS, None, self.launched, ops, "100").accepted)

    def test_track_move_with_six_keeps_turn(self):
        state = make_state(6, R1=piece("T29"))
        ops = [
            SetTurn("100"),
            ROLL,
            Set("action", "move"),
            Set("R1", piece("T35")),
            Set("lastTwoRolls", [6, -1]),
            Set("lastTwoMoves", ["1", ""]),
        ]
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_landing_on_own_color_waits_for_jump(self):
        state = make_state(2, R0=piece("T30"))
        ops = [
            SetTurn("100"),
            Set("action", "move"),
            Set("R0", piece("T32")),
            Set("lastTwoRolls", [2, -1]),
            Set("lastTwoMoves", ["0", ""]),
        ]
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)
        self.assertFalse(verify(PLAYERS, None, state, passing("move", Set("R0", piece("T32"))), "100").accepted)

    def test_yellow_moves_into_final_stretch(self):
        state = make_state(5, Y2=piece("T40"))
        ops = [SetTurn("100"), ROLL, Set("action", "move"), Set("Y2", piece("F02")), *RESET]
        self.assertTrue(verify(PLAYERS, None, state, ops, "200").accepted)

    def test_hangar_piece_cannot_move(self):
        state = make_state(3, R0=piece("L00"))
        ops = passing("move", Set("R1", piece("T21")))
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_move_while_jump_pending_rejected(self):
        state = make_state(2, rolls=(2, -1), moves=("0", ""), R0=piece("T32"), R1=piece("T10"))
        ops = passing("move", Set("R1", piece("T12")))
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)


class TestCaptures(unittest.TestCase):
    def test_capture_on_destination(self):
        state = make_state(3, R0=piece("L00"), Y1=piece("T21"))
        ops = passing("move", Set("R0", piece("T21")), Set("Y1", piece("H01")))
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_missing_capture_rejected(self):
        state = make_state(3, R0=piece("L00"), Y1=piece("T21"))
        ops = passing("move", Set("R0", piece("T21")))
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_extra_capture_rejected(self):
        state = make_state(3, R0=piece("L00"), Y1=piece("T22"))
        ops = passing("move", Set("R0", piece("T21")), Set("Y1", piece("H01")))
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_whole_opponent_stack_captured(self):
        state = make_state(
            3, R0=piece("L00"), Y0=piece("T21", stacked=True), Y3=piece("T21", stacked=True)
        )
        ops = passing(
            "move",
            Set("R0", piece("T21")),
            Set("Y0", piece("H00")),
            Set("Y3", piece("H03")),
        )
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)


class TestStacks(unittest.TestCase):
    def test_stack_moves_as_unit(self):
        state = make_state(3, R0=piece("T29", True), R1=piece("T29", True))
        ops = passing("move", Set("R0", piece("T32", True)), Set("R1", piece("T32", True)))
        # T32 is red: the stack waits for its jump instead of passing
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)
        ops = [
            SetTurn("100"),
            Set("action", "move"),
            Set("R0", piece("T32", True)),
            Set("R1", piece("T32", True)),
            Set("lastTwoRolls", [3, -1]),
            Set("lastTwoMoves", ["01", ""]),
        ]
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_stacked_piece_cannot_leave_alone(self):
        state = make_state(2, R0=piece("T29", True), R1=piece("T29", True))
        ops = passing("move", Set("R0", piece("T31", True)))
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_unstacked_pieces_cannot_move_together(self):
        state = make_state(2, R0=piece("T29"), R1=piece("T29"))
        ops = passing("move", Set("R0", piece("T31")), Set("R1", piece("T31")))
        self.assertFalse(verify(PLAYERS, None, state, ops, "100").accepted)


class TestPass(unittest.TestCase):
    def test_pass_on_odd_die_with_all_in_hangar(self):
        ops = passing("move")
        self.assertTrue(verify(PLAYERS, None, make_state(3, "initialize"), ops, "100").accepted)

    def test_pass_rejected_on_even_die(self):
        self.assertFalse(verify(PLAYERS, None, make_state(4), passing("move"), "100").accepted)

    def test_pass_rejected_with_piece_out(self):
        state = make_state(3, R3=piece("T40"))
        self.assertFalse(verify(PLAYERS, None, state, passing("move"), "100").accepted)


class TestTripleSix(unittest.TestCase):
    def setUp(self):
        self.state = make_state(
            6,
            rolls=(6, 6),
            moves=("0", "13"),
            R0=piece("T30"),
            R1=piece("T25", True),
            R3=piece("T25", True),
            R2=piece("L00"),
        )

    def test_pieces_of_last_two_moves_return_home(self):
        ops = passing(
            "move",
            Set("R0", piece("H00")),
            Set("R1", piece("H01")),
            Set("R3", piece("H03")),
        )
        self.assertTrue(verify(PLAYERS, None, self.state, ops, "100").accepted)

    def test_regular_move_rejected(self):
        ops = [
            SetTurn("100"),
            ROLL,
            Set("action", "move"),
            Set("R2", piece("T24")),
            Set("lastTwoRolls", [6, 6]),
            Set("lastTwoMoves", ["2", "0"]),
        ]
        self.assertFalse(verify(PLAYERS, None, self.state, ops, "100").accepted)

    def test_partial_eviction_rejected(self):
        ops = passing("move", Set("R0", piece("H00")), Set("R1", piece("H01")))
        self.assertFalse(verify(PLAYERS, None, self.state, ops, "100").accepted)

    def test_finished_piece_stays_face_down(self):
        # R0 finished on the first six, R1 moved on the second
        state = make_state(
            6,
            rolls=(6, 6),
            moves=("1", "0"),
            R0=piece("H00", face_down=True),
            R1=piece("T30"),
        )
        ops = passing("move", Set("R1", piece("H01")))
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)
        revived = passing("move", Set("R0", piece("H00")), Set("R1", piece("H01")))
        self.assertFalse(verify(PLAYERS, None, state, revived, "100").accepted)


class TestFinishing(unittest.TestCase):
    def test_exact_roll_reaches_hangar_face_down(self):
        state = make_state(2, R0=piece("F03"))
        ops = passing("move", Set("R0", piece("H00", face_down=True)))
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_six_from_stretch_start(self):
        state = make_state(6, R2=piece("T16"))
        ops = [
            SetTurn("100"),
            ROLL,
            Set("action", "move"),
            Set("R2", piece("H02", face_down=True)),
            Set("lastTwoRolls", [6, -1]),
            Set("lastTwoMoves", ["2", ""]),
        ]
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)

    def test_last_piece_home_ends_game(self):
        state = make_state(
            2,
            R0=piece("F03"),
            R1=piece("H01", face_down=True),
            R2=piece("H02", face_down=True),
            R3=piece("H03", face_down=True),
        )
        ops = [
            SetTurn("100"),
            Set("action", "move"),
            Set("R0", piece("H00", face_down=True)),
            EndGame("100"),
        ]
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)
        self.assertFalse(
            verify(PLAYERS, None, state, passing("move", Set("R0", piece("H00", face_down=True))), "100").accepted
        )

    def test_inexact_roll_backtracks_instead_of_winning(self):
        state = make_state(
            5,
            R0=piece("F03"),
            R1=piece("H01", face_down=True),
            R2=piece("H02", face_down=True),
            R3=piece("H03", face_down=True),
        )
        win = [
            SetTurn("100"),
            Set("action", "move"),
            Set("R0", piece("H00", face_down=True)),
            EndGame("100"),
        ]
        self.assertFalse(verify(PLAYERS, None, state, win, "100").accepted)
        backtrack = passing("move", Set("R0", piece("F02")))
        self.assertTrue(verify(PLAYERS, None, state, backtrack, "100").accepted)

    def test_overshoot_from_track(self):
        state = make_state(6, R0=piece("T15"))
        ops = [
            SetTurn("100"),
            ROLL,
            Set("action", "move"),
            Set("R0", piece("F04")),
            Set("lastTwoRolls", [6, -1]),
            Set("lastTwoMoves", ["0", ""]),
        ]
        self.assertTrue(verify(PLAYERS, None, state, ops, "100").accepted)


if __name__ == "__main__":
    unittest.main()
