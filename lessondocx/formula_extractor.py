# lessondocx/formula_extractor.py
import re
from typing import Iterable, List, Tuple

from .models import FormulaSpan, Fraction, MathNode, MathText, Span

# each side: a bare word or one parenthesised group
_SLASH_FRACTION = re.compile(r"^\s*(\w+|\([^()]*\))\s*/\s*(\w+|\([^()]*\))\s*$")
_LATEX_FRACTION = re.compile(r"\\frac\{(.+?)\}\{(.+?)\}")


def _strip_parens(operand: str) -> str:
    if operand.startswith("(") and operand.endswith(")"):
        return operand[1:-1].strip()
    return operand


class FormulaExtractor:
    """Maps formula spans onto the small set of math structures Word gets."""

    def to_math_node(self, expression: str) -> MathNode:
        """
        Recognise simple fractions

        Args:
            expression: formula content without "$" delimiters

        Returns:
            Fraction for "a/b", "(a+b)/(c)" or the first \\frac{a}{b};
            MathText with the expression unchanged otherwise
        """
        match = _SLASH_FRACTION.match(expression)
        if match:
            return Fraction(
                numerator=_strip_parens(match.group(1)),
                denominator=_strip_parens(match.group(2)),
            )

        # only the first \frac is kept; the rest of the span is dropped
        match = _LATEX_FRACTION.search(expression)
        if match:
            return Fraction(numerator=match.group(1), denominator=match.group(2))

        return MathText(expression)

    def extract(self, spans: Iterable[Span]) -> List[Tuple[FormulaSpan, MathNode]]:
        return [
            (span, self.to_math_node(span.content))
            for span in spans
            if isinstance(span, FormulaSpan)
        ]
