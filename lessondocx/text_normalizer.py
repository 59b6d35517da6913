# lessondocx/text_normalizer.py
"""Clean-up rules for pasted lesson text.

Each rule is a pure str -> str function and is safe to apply repeatedly.
"""

import re
from typing import Callable, Dict

_BRACKET_DISPLAY = re.compile(r"\\\[([\s\S]*?)\\\]")
_PAREN_INLINE = re.compile(r"\\\((.*?)\\\)")
_DOUBLE_DOLLAR = re.compile(r"\$\$([\s\S]*?)\$\$")
_INLINE_MATH = re.compile(r"\$([^$]+)\$")
_SLASH_FRACTION = re.compile(r"(\b\w+|\([^)]+\))\s*/\s*(\b\w+|\([^)]+\))")
_EQUALS = re.compile(r"\s*=\s*")
_BLANK_RUN = re.compile(r"\n\s*\n\s*\n")


def _dollar_wrap(match: re.Match) -> str:
    return f"${match.group(1)}$"


def unify_delimiters(text: str) -> str:
    """\\[...\\] and \\(...\\) become $...$; $$...$$ collapses to $...$."""
    text = _BRACKET_DISPLAY.sub(_dollar_wrap, text)
    text = _PAREN_INLINE.sub(_dollar_wrap, text)
    return _DOUBLE_DOLLAR.sub(_dollar_wrap, text)


def _frac(match: re.Match) -> str:
    return "\\frac{%s}{%s}" % (match.group(1), match.group(2))


def _fractionize_math(expression: str) -> str:
    # a group like (x/2) is wrapped verbatim first; repeat until no slash is left to rewrite
    while True:
        rewritten = _SLASH_FRACTION.sub(_frac, expression)
        if rewritten == expression:
            return expression
        expression = rewritten


def fractionize(text: str) -> str:
    """Inside $...$, a/b and (a)/(b) become \\frac{a}{b} and \\frac{(a)}{(b)}.

    Nested slashes are rewritten too, so (x/2)/(y) ends as
    \\frac{(\\frac{x}{2})}{(y)}.
    """
    return _INLINE_MATH.sub(lambda m: "$" + _fractionize_math(m.group(1)) + "$", text)


def clean_whitespace(text: str) -> str:
    """
    Tidy spacing

    Inside $...$ every "=" gets exactly one space on each side. Outside math,
    three or more consecutive line breaks (blank lines may hold spaces)
    collapse to two.
    """
    pieces = []
    last_end = 0
    for match in _INLINE_MATH.finditer(text):
        pieces.append(_BLANK_RUN.sub("\n\n", text[last_end:match.start()]))
        pieces.append("$" + _EQUALS.sub(" = ", match.group(1)) + "$")
        last_end = match.end()
    pieces.append(_BLANK_RUN.sub("\n\n", text[last_end:]))
    return "".join(pieces)


def auto_fix(text: str) -> str:
    return clean_whitespace(fractionize(unify_delimiters(text)))


class TextNormalizer:
    """Named access to the rules, as offered by the editing tool."""

    RULES: Dict[str, Callable[[str], str]] = {
        "delimiters": unify_delimiters,
        "fractions": fractionize,
        "whitespace": clean_whitespace,
    }

    def apply(self, text: str, rule: str) -> str:
        try:
            fn = self.RULES[rule]
        except KeyError:
            raise KeyError(f"Unknown rule {rule!r}; expected one of: {', '.join(self.RULES)}") from None
        return fn(text)

    def auto_fix(self, text: str) -> str:
        return auto_fix(text)
