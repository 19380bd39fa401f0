from __future__ import annotations

from dataclasses import dataclass

ASSIGN = "="


@dataclass(frozen=True)
class Instruction:
    """
    One three-address code step: ``result = arg1 operator arg2``.

    The assignment form uses ``operator == "="`` with ``arg1`` as the source
    and an empty ``arg2``.
    """

    operator: str
    arg1: str
    arg2: str
    result: str

    @property
    def is_assignment(self) -> bool:
        return self.operator == ASSIGN

    def __str__(self) -> str:
        if self.is_assignment:
            # Simple assignment: x = y
            return f"{self.result} = {self.arg1}"
        # Binary operation: x = y op z
        return f"{self.result} = {self.arg1} {self.operator} {self.arg2}"

    def to_quadruple(self) -> str:
        """Render as ``(op, arg1, arg2, result)``; arg2 is blank for assignments."""
        arg2 = " " if self.is_assignment else self.arg2
        return f"({self.operator}, {self.arg1}, {arg2}, {self.result})"

    def to_triple(self) -> str:
        """Render as ``(op, arg1, arg2)``."""
        return f"({self.operator}, {self.arg1}, {self.arg2})"


def assign(source: str, target: str) -> Instruction:
    """Build the final ``target = source`` instruction."""
    return Instruction(ASSIGN, source, "", target)
