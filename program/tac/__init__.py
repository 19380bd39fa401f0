"""
TAC (Three Address Code) Generation Module

Turns an infix arithmetic expression into three-address code and the
related intermediate representations used by compiler back ends.

Main components:
- lexer: expression tokenizer
- expression_generator: operator-precedence reduction to TAC
- ir_views: TAC, quadruple, triple and indirect triple renderings
- pipeline: end-to-end helpers used by the driver and the server
"""

from .lexer import (
    Token,
    TokenType,
    tokenize
)

from .instruction import Instruction

from .temp_manager import TemporaryManager

from .base_generator import (
    TACGenerator,
    TACGenerationError,
    MalformedExpressionError
)

from .expression_generator import (
    ExpressionTACGenerator,
    reduce
)

from .ir_views import (
    IndirectTriples,
    tac_lines,
    quadruple_lines,
    triples,
    indirect_triples,
    number_rows
)

from .pipeline import (
    IRViews,
    process_expression,
    derive_views
)

__all__ = [
    'Token',
    'TokenType',
    'tokenize',
    'Instruction',
    'TemporaryManager',
    'TACGenerator',
    'TACGenerationError',
    'MalformedExpressionError',
    'ExpressionTACGenerator',
    'reduce',
    'IndirectTriples',
    'tac_lines',
    'quadruple_lines',
    'triples',
    'indirect_triples',
    'number_rows',
    'IRViews',
    'process_expression',
    'derive_views'
]
