import logging
from dataclasses import dataclass, field

from calculator.operators import OPERATOR_CONTRACTS, OperatorContract
from calculator.tokenizer import Token, TokenType, untokenize
from calculator.utils import CalculatorError, point_at

logger = logging.getLogger(__name__)


@dataclass
class EvaluationError(CalculatorError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        line = untokenize(self.tokens)
        if self.error_token_idx < len(self.tokens):
            # untokenize of a token prefix is a prefix of the full line
            rendered = untokenize(self.tokens[: self.error_token_idx + 1])
            caret_idx = len(rendered) - len(self.tokens[self.error_token_idx].lexeme)
        else:
            caret_idx = len(line)
        return "\n".join([f"[Evaluation error] {self.errmsg}", *point_at(line, caret_idx)])


@dataclass
class UnsupportedOperator(EvaluationError):
    symbol: str = field(default="")


class MismatchedParenthesis(EvaluationError):
    pass


class InsufficientOperands(EvaluationError):
    pass


class MalformedExpression(EvaluationError):
    pass


def evaluate(tokens: list[Token]) -> float:
    """Evaluates an infix token sequence in a single pass.

    This is Dijkstra's shunting-yard algorithm, except that instead of emitting an operator
    to a postfix queue it is applied right away to the two topmost operands. The operator
    stack holds indices into ``tokens`` so that errors can point at the offending token.
    """
    operands: list[float] = []
    operators: list[int] = []

    def contract_of(token_idx: int) -> OperatorContract:
        symbol = tokens[token_idx].symbol
        contract = OPERATOR_CONTRACTS.get(symbol)
        if contract is None:
            raise UnsupportedOperator(
                f"Operator {symbol!r} is not supported", tokens=tokens, error_token_idx=token_idx, symbol=symbol
            )
        return contract

    def apply(token_idx: int) -> None:
        contract = contract_of(token_idx)
        if len(operands) < 2:
            raise InsufficientOperands(
                f"Operator {contract.symbol!r} needs two operands, {len(operands)} available",
                tokens=tokens,
                error_token_idx=token_idx,
            )
        right = operands.pop()
        left = operands.pop()
        result = contract.apply(left, right)
        logger.debug("Reduced %r %s %r => %r", left, contract.symbol, right, result)
        operands.append(result)

    for i, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            operands.append(token.value)
        elif token.type is TokenType.OPERATOR:
            while operators and tokens[operators[-1]].type is TokenType.OPERATOR:
                if not contract_of(i).yields_to(contract_of(operators[-1])):
                    break
                apply(operators.pop())
            operators.append(i)
        elif token.type is TokenType.BRACKET_OPEN:
            operators.append(i)
        elif token.type is TokenType.BRACKET_CLOSE:
            while operators and tokens[operators[-1]].type is not TokenType.BRACKET_OPEN:
                apply(operators.pop())
            if not operators:
                raise MismatchedParenthesis("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
            operators.pop()

    while operators:
        op_idx = operators.pop()
        if tokens[op_idx].type is not TokenType.OPERATOR:
            raise MismatchedParenthesis("Unclosed bracket", tokens=tokens, error_token_idx=op_idx)
        apply(op_idx)

    if len(operands) != 1:
        raise MalformedExpression(
            f"Expected a single value, found {len(operands)}",
            tokens=tokens,
            error_token_idx=len(tokens) if not operands else _first_dangling_number(tokens),
        )
    return operands[0]


def _first_dangling_number(tokens: list[Token]) -> int:
    """Index of the first number that directly follows an operand without an operator between them"""
    for i in range(1, len(tokens)):
        if tokens[i].type is TokenType.NUMBER and tokens[i - 1].type in (TokenType.NUMBER, TokenType.BRACKET_CLOSE):
            return i
    return len(tokens)
