from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .expression_generator import reduce
from .instruction import Instruction
from .ir_views import (
    IndirectTriples,
    indirect_triples,
    quadruple_lines,
    tac_lines,
    triples,
)
from .lexer import tokenize
from .temp_manager import is_temporary


def process_expression(expression: str, result_var: str) -> List[Instruction]:
    """Tokenize ``expression`` and reduce it to TAC storing into ``result_var``."""
    return reduce(tokenize(expression), result_var)


@dataclass(frozen=True)
class IRViews:
    """All four renderings of one instruction list."""

    tac: List[str]
    quadruples: List[str]
    triples: List[str]
    indirect_triples: IndirectTriples
    instruction_count: int
    temporaries_used: int


def derive_views(instructions: Sequence[Instruction]) -> IRViews:
    temporaries = {instr.result for instr in instructions
                   if not instr.is_assignment and is_temporary(instr.result)}
    return IRViews(
        tac=tac_lines(instructions),
        quadruples=quadruple_lines(instructions),
        triples=triples(instructions),
        indirect_triples=indirect_triples(instructions),
        instruction_count=len(instructions),
        temporaries_used=len(temporaries),
    )
