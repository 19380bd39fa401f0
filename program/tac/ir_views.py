"""
Display views derived from a TAC instruction list.

Every function here is a pure projection: the same instructions always give
the same rows, and the input is never modified.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

from .instruction import Instruction


class IndirectTriples(NamedTuple):
    pointer_table: List[str]
    instruction_table: List[str]


def tac_lines(instructions: Sequence[Instruction]) -> List[str]:
    """``result = arg1 op arg2`` per instruction (``result = arg1`` for assignments)."""
    return [str(instr) for instr in instructions]


def quadruple_lines(instructions: Sequence[Instruction]) -> List[str]:
    return [instr.to_quadruple() for instr in instructions]


def triples(instructions: Sequence[Instruction]) -> List[str]:
    """
    ``(op, arg1, arg2)`` per instruction.

    The row index is the triple number. Operands keep their original names;
    references to earlier results are not rewritten into indices.
    """
    return [instr.to_triple() for instr in instructions]


def indirect_triples(instructions: Sequence[Instruction]) -> IndirectTriples:
    """Triples plus a pointer table giving execution order (identity here)."""
    pointer_table = [f"{i} -> {i}" for i in range(len(instructions))]
    return IndirectTriples(pointer_table, triples(instructions))


def number_rows(rows: Iterable[str], start: int = 1) -> List[str]:
    """Prefix rows with their index, e.g. ``1: t1 = b * c``."""
    return [f"{i}: {row}" for i, row in enumerate(rows, start)]
