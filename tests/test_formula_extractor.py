"""Unit tests for formula-to-math-node mapping."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from lessondocx.models import FormulaSpan, Fraction, MathText, PlainSpan


class TestSlashFractions:

    def test_simple(self, extractor):
        assert extractor.to_math_node("x/y") == Fraction("x", "y")

    def test_spaces_around_slash(self, extractor):
        assert extractor.to_math_node(" 3 / 4 ") == Fraction("3", "4")

    def test_parenthesised_operands(self, extractor):
        assert extractor.to_math_node("(a+b)/(c)") == Fraction("a+b", "c")

    def test_mixed_operands(self, extractor):
        assert extractor.to_math_node("(x-1)/2") == Fraction("x-1", "2")

    def test_chained_slash_is_text(self, extractor):
        assert extractor.to_math_node("a/b/c") == MathText("a/b/c")

    def test_surrounding_terms_is_text(self, extractor):
        assert extractor.to_math_node("1 + a/b") == MathText("1 + a/b")


class TestLatexFractions:

    def test_frac(self, extractor):
        assert extractor.to_math_node("\\frac{1}{2}") == Fraction("1", "2")

    def test_only_first_frac_kept(self, extractor):
        assert extractor.to_math_node("\\frac{1}{2} + \\frac{3}{4}") == Fraction("1", "2")

    def test_frac_with_surrounding_text(self, extractor):
        assert extractor.to_math_node("x = \\frac{a}{b}") == Fraction("a", "b")


class TestFallback:

    def test_plain_expression(self, extractor):
        assert extractor.to_math_node("x^2 + 1") == MathText("x^2 + 1")

    def test_empty_expression(self, extractor):
        assert extractor.to_math_node("") == MathText("")


class TestExtract:

    def test_pairs_formula_spans_only(self, extractor, formatter):
        spans = formatter.format("**Ratio** $a/b$ and $x^2$")
        pairs = extractor.extract(spans)
        assert [span.content for span, _ in pairs] == ["a/b", "x^2"]
        assert [node for _, node in pairs] == [Fraction("a", "b"), MathText("x^2")]

    def test_no_formulas(self, extractor):
        assert extractor.extract([PlainSpan("text")]) == []

    def test_display_formula(self, extractor):
        span = FormulaSpan(content="\\frac{p}{q}", raw_latex="$$\\frac{p}{q}$$", display=True)
        assert extractor.extract([span]) == [(span, Fraction("p", "q"))]
