"""
Unit tests for the parameter list loader
"""

import tempfile
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hlcd.code import CodeParameters
from hlcd.errors import ParameterFileError
from hlcd.parameters import load_parameters, parse_parameters

SAMPLE = """\
// Hermitian LCD candidates
5, 2, 3

7, 3, 4 /from table 2
  // indented comment
6,1,6
"""


class TestParameterList(unittest.TestCase):
    """Test cases for parsing parameter records"""

    def test_parse(self):
        """Test comments, notes and blank lines"""
        parameters = parse_parameters(SAMPLE.splitlines())
        self.assertEqual(parameters, [
            CodeParameters(5, 2, 3),
            CodeParameters(7, 3, 4),
            CodeParameters(6, 1, 6),
        ])

    def test_offset_and_base(self):
        """Test that the offset is added to every d"""
        parameters = parse_parameters(["5, 2, 3", "7, 3, 4"], offset=1, base=2)
        self.assertEqual([p.d for p in parameters], [4, 5])
        self.assertTrue(all(p.base == 2 for p in parameters))

    def test_wrong_field_count(self):
        """Test that the failing line number is reported"""
        with self.assertRaises(ParameterFileError) as ctx:
            parse_parameters(["5, 2, 3", "// ok", "5, 2"])
        self.assertEqual(ctx.exception.line_number, 3)
        self.assertEqual(ctx.exception.line, "5, 2")

    def test_not_an_integer(self):
        """Test a non-numeric field"""
        with self.assertRaises(ParameterFileError) as ctx:
            parse_parameters(["5, two, 3"])
        self.assertEqual(ctx.exception.line_number, 1)

    def test_invalid_parameters(self):
        """Test that parameter validation errors are wrapped"""
        with self.assertRaises(ParameterFileError) as ctx:
            parse_parameters(["", "3, 4, 1"])
        self.assertEqual(ctx.exception.line_number, 2)
        with self.assertRaises(ParameterFileError):
            parse_parameters(["40, 2, 3"])
        # still a ValueError for callers that do not know the package
        with self.assertRaises(ValueError):
            parse_parameters(["5, 2, 0"])

    def test_load_file(self):
        """Test reading a list from disk"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "parameters.txt"
            path.write_text(SAMPLE, encoding="utf-8")
            parameters = load_parameters(path)
            self.assertEqual(len(parameters), 3)

            path.write_text("5, 2, 3\nbroken\n", encoding="utf-8")
            with self.assertRaises(ParameterFileError) as ctx:
                load_parameters(path)
            self.assertEqual(ctx.exception.path, str(path))
            self.assertEqual(ctx.exception.line_number, 2)


if __name__ == "__main__":
    unittest.main()
