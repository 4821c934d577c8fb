import enum
import logging
import re
import string
from dataclasses import dataclass

from calculator.utils import CalculatorError, PrintableEnum, point_at

logger = logging.getLogger(__name__)


@dataclass
class InvalidNumber(CalculatorError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *point_at(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str
    pos: int = 0

    @property
    def value(self) -> float:
        if self.type is not TokenType.NUMBER:
            raise TypeError(f"{self.type} token has no numeric value")
        return float(self.lexeme)

    @property
    def symbol(self) -> str:
        if self.type is not TokenType.OPERATOR:
            raise TypeError(f"{self.type} token has no operator symbol")
        return self.lexeme

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


# sign, integer part with optional fraction (or a bare fraction), optional exponent
FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

BRACKETS = {
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _starts_signed_number(tokens: list[Token]) -> bool:
    return not tokens or tokens[-1].type is not TokenType.NUMBER


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if char == " ":
            i += 1
            continue
        if char in BRACKETS:
            tokens.append(Token(type=BRACKETS[char], lexeme=char, pos=i))
            i += 1
        elif char in string.digits or (char in "+-" and _starts_signed_number(tokens)):
            match = FLOAT_LITERAL.match(code, i)
            if match is None:
                raise InvalidNumber(f"Invalid number literal starting with {char!r}", code=code, error_char_idx=i)
            tokens.append(Token(type=TokenType.NUMBER, lexeme=match.group(), pos=i))
            i = match.end()
        else:
            tokens.append(Token(type=TokenType.OPERATOR, lexeme=char, pos=i))
            i += 1

    logger.debug("Tokenized %r into %s", code, " ".join(str(t) for t in tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s*\^\s*", "^", result)
    return result
