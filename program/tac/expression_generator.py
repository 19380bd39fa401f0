import logging
from typing import List, Optional

from .base_generator import TACGenerator, MalformedExpressionError
from .instruction import Instruction, assign
from .lexer import Token, TokenType

logger = logging.getLogger(__name__)

PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '%': 2,
    '^': 3,
}

RIGHT_ASSOCIATIVE = frozenset({'^'})


def get_precedence(operator: str) -> int:
    """Binding strength of an operator; unknown operators bind loosest (0)."""
    return PRECEDENCE.get(operator, 0)


def is_right_associative(operator: str) -> bool:
    return operator in RIGHT_ASSOCIATIVE


class ExpressionTACGenerator(TACGenerator):
    """
    TAC generator for infix arithmetic expressions.

    Uses the two-stack operator-precedence scheme (shunting-yard): operands
    and operators are stacked while scanning left to right, and every time an
    operator is reduced its result lands in a fresh temporary that goes back
    on the operand stack. The final value is assigned to the caller's result
    variable.

    Malformed input degrades quietly: unbalanced parentheses are tolerated
    and empty input yields no code. The only hard failure is an operator that
    finds fewer than two operands, reported as MalformedExpressionError.
    """

    def __init__(self):
        super().__init__()
        self._operands: List[str] = []
        self._operators: List[Token] = []
        self._position: Optional[int] = None

    def reset(self) -> None:
        super().reset()
        self._operands.clear()
        self._operators.clear()
        self._position = None

    def generate(self, tokens: List[Token], result_var: str) -> List[Instruction]:
        """
        Translate a token sequence into TAC.

        State from previous calls is discarded first, so temporaries always
        start again at ``t1``.

        Args:
            tokens: Tokens produced by the lexer
            result_var: Variable receiving the final value

        Returns:
            List[Instruction]: Emitted instructions, final assignment last

        Raises:
            MalformedExpressionError: If an operator lacks operands
        """
        self.reset()

        for position, token in enumerate(tokens):
            self._position = position
            if token.type in (TokenType.NUMBER, TokenType.IDENTIFIER):
                self._operands.append(token.value)
            elif token.type is TokenType.OPERATOR:
                self._push_operator(token)
            elif token.is_open_paren:
                self._operators.append(token)
            elif token.is_close_paren:
                self._close_group()

        self._position = None
        while self._operators:
            if self._operators[-1].is_open_paren:
                self._operators.pop()
                logger.debug("dropping unclosed '('")
                continue
            self._reduce_top()

        if self._operands:
            self.emit(assign(self._operands[-1], result_var))

        return self.get_instructions()

    def _push_operator(self, token: Token) -> None:
        while self._operators and self._should_reduce(self._operators[-1], token.value):
            self._reduce_top()
        self._operators.append(token)

    def _should_reduce(self, top: Token, operator: str) -> bool:
        if top.type is not TokenType.OPERATOR:
            return False
        top_prec = get_precedence(top.value)
        prec = get_precedence(operator)
        if is_right_associative(operator):
            return top_prec > prec
        return top_prec >= prec

    def _close_group(self) -> None:
        while self._operators and not self._operators[-1].is_open_paren:
            self._reduce_top()
        if self._operators:
            self._operators.pop()
        else:
            logger.debug("ignoring unmatched ')' at token %s", self._position)

    def _reduce_top(self) -> None:
        """Pop one operator and its two operands, emit it, push the result temp."""
        operator = self._operators.pop().value
        if len(self._operands) < 2:
            raise MalformedExpressionError(
                f"operator '{operator}' needs two operands, found {len(self._operands)}",
                operator=operator,
                position=self._position,
            )
        arg2 = self._operands.pop()
        arg1 = self._operands.pop()
        temp = self.new_temp()
        self.emit(Instruction(operator, arg1, arg2, temp))
        self._operands.append(temp)


def reduce(tokens: List[Token], result_var: str) -> List[Instruction]:
    """Run a fresh ExpressionTACGenerator over ``tokens``."""
    return ExpressionTACGenerator().generate(tokens, result_var)
