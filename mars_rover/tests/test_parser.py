import unittest

from mars_rover import Instruction, Orientation, ParseError, Point, RoverPlacement, parse_instructions, parse_placement


class PlacementParserTests(unittest.TestCase):
    def test_valid_placement(self):
        self.assertEqual(parse_placement("1 2 N"), RoverPlacement(Point(1, 2), Orientation.NORTH))
        self.assertEqual(parse_placement("  3 0 W\n"), RoverPlacement(Point(3, 0), Orientation.WEST))

    def test_unknown_orientation_code(self):
        with self.assertRaises(ParseError) as ctx:
            parse_placement("1 2 Q")
        self.assertEqual(ctx.exception.token, "Q")
        self.assertIn("'Q'", str(ctx.exception))

    def test_orientation_name_is_not_a_code(self):
        with self.assertRaises(ParseError) as ctx:
            parse_placement("1 2 NORTH")
        self.assertEqual(ctx.exception.token, "NORTH")

    def test_non_integer_coordinate(self):
        with self.assertRaises(ParseError) as ctx:
            parse_placement("1 y N")
        self.assertEqual(ctx.exception.token, "y")

    def test_coordinate_must_be_plain_ascii_digits(self):
        for token in ("1_0", "\u0661", "1.0", "0x1", "+"):
            with self.subTest(token=token):
                with self.assertRaises(ParseError) as ctx:
                    parse_placement(f"{token} 2 N")
                self.assertEqual(ctx.exception.token, token)

    def test_signed_coordinates(self):
        self.assertEqual(parse_placement("-1 +2 E").position, Point(-1, 2))

    def test_wrong_token_count(self):
        for line in ("", "1 2", "1 2 N extra"):
            with self.subTest(line=line):
                with self.assertRaises(ParseError):
                    parse_placement(line)

    def test_parse_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            parse_placement("1 2")


class InstructionParserTests(unittest.TestCase):
    def test_maps_each_character(self):
        self.assertEqual(
            parse_instructions("LRM"),
            (Instruction.LEFT, Instruction.RIGHT, Instruction.FORWARD),
        )
        self.assertEqual(len(parse_instructions("LMLMLMLMM")), 9)

    def test_empty_line(self):
        self.assertEqual(parse_instructions(""), ())
        self.assertEqual(parse_instructions("\n"), ())

    def test_trailing_newline_is_ignored(self):
        self.assertEqual(parse_instructions("MM\n"), (Instruction.FORWARD, Instruction.FORWARD))

    def test_unknown_character_rejected(self):
        with self.assertRaises(ParseError) as ctx:
            parse_instructions("LMX")
        self.assertEqual(ctx.exception.token, "X")
        self.assertIn("index 2", str(ctx.exception))

    def test_lowercase_rejected(self):
        with self.assertRaises(ParseError):
            parse_instructions("lm")


if __name__ == "__main__":
    unittest.main()
