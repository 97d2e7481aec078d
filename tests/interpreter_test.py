import unittest

from crabby.interpreter import EXPECTED_STRING, UNEXPECTED_TOKEN, Diagnostic, Output, interpret


class InterpretTestCase(unittest.TestCase):

    def test_interpret(self):
        cases = {
            "": [],
            "  \n\t\r\n": [],
            "print \"hello\"": [Output("hello")],
            "print \"a\" print \"b\"": [Output("a"), Output("b")],
            "print \"a\"\n\nprint \"b\"\n": [Output("a"), Output("b")],
            "print \"\"": [Output("")],
            "print \"C:\\temp\\n\"": [Output("C:\\temp\\n")],
            "print \"unterminated\nrest": [Output("unterminated\nrest")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(interpret(case)), case)

    def test_malformed(self):
        cases = {
            "print 123": [Diagnostic(EXPECTED_STRING)],
            "print": [Diagnostic(EXPECTED_STRING)],
            "\"orphan string\"": [Diagnostic(UNEXPECTED_TOKEN)],
            "print print \"a\"": [Diagnostic(EXPECTED_STRING), Diagnostic(UNEXPECTED_TOKEN)],
            "print 1 print \"x\"": [Diagnostic(EXPECTED_STRING), Output("x")],
            "\"a\" print \"b\"": [Diagnostic(UNEXPECTED_TOKEN), Output("b")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(interpret(case)), case)

    def test_unrecognized_char(self):
        should_stop = ["x print \"a\"", "print \"a\" 42 print \"b\"", "PRINT \"a\""]
        expected = [[], [Output("a")], []]
        for case, result in zip(should_stop, expected):
            self.assertEqual(result, list(interpret(case)), case)

    def test_idempotence(self):
        source = "print \"one\" \"two\" print \"three\" print"
        self.assertEqual(list(interpret(source)), list(interpret(source)))

    def test_lazy(self):
        results = interpret("print \"first\" print \"second\"")
        self.assertEqual(Output("first"), next(results))
        self.assertEqual(Output("second"), next(results))
        self.assertRaises(StopIteration, next, results)


if __name__ == '__main__':
    unittest.main()
