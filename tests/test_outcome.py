from __future__ import annotations

import unittest

from recipe_harvest.exceptions import (
    ElementNotFoundInHtml,
    FieldNotProvidedByWebsiteException,
    OpenGraphException,
    SchemaOrgException,
    StaticValueException,
)
from recipe_harvest.outcome import Outcome, OutcomeKind


class OutcomeTests(unittest.TestCase):
    def test_classification(self) -> None:
        cases = [
            (NotImplementedError(), OutcomeKind.NOT_IMPLEMENTED),
            (SchemaOrgException("x"), OutcomeKind.SOURCE_ABSENT),
            (OpenGraphException("x"), OutcomeKind.SOURCE_ABSENT),
            (ElementNotFoundInHtml("x"), OutcomeKind.SOURCE_ABSENT),
            (StaticValueException("x", return_value=1), OutcomeKind.DECLARED_CONSTANT),
            (FieldNotProvidedByWebsiteException("x"), OutcomeKind.DECLARED_CONSTANT),
            (KeyError("x"), OutcomeKind.FAILED),
        ]
        for error, kind in cases:
            with self.subTest(error=type(error).__name__):
                self.assertIs(Outcome.from_error(error).kind, kind)

    def test_declared_constant_carries_value(self) -> None:
        outcome = Outcome.from_error(StaticValueException("x", return_value="Kitchen"))
        self.assertEqual(outcome.value, "Kitchen")

    def test_capture(self) -> None:
        self.assertEqual(Outcome.capture(lambda: 5), Outcome.found(5))

        def broken():
            raise SchemaOrgException("missing")

        outcome = Outcome.capture(broken)
        self.assertTrue(outcome.wants_fallback)
        self.assertFalse(outcome.ok)

    def test_unwrap(self) -> None:
        self.assertEqual(Outcome.found("a").unwrap(), "a")
        with self.assertRaises(SchemaOrgException):
            Outcome.from_error(SchemaOrgException("missing")).unwrap()
        with self.assertRaises(RuntimeError):
            Outcome(OutcomeKind.FAILED).unwrap()


if __name__ == "__main__":
    unittest.main()
