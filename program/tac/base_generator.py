import logging
from typing import List, Optional, Dict, Any
from abc import ABC, abstractmethod

from .instruction import Instruction
from .lexer import Token
from .temp_manager import TemporaryManager

logger = logging.getLogger(__name__)


class TACGenerator(ABC):
    """
    Base class for Three Address Code generation.
    Owns the emitted instruction list and the temporary allocator.
    """

    def __init__(self):
        self.instructions: List[Instruction] = []
        self.temp_manager = TemporaryManager()

    def emit(self, instruction: Instruction) -> None:
        """
        Emit a TAC instruction to the instruction list.

        Args:
            instruction: TAC instruction to emit
        """
        logger.debug("emit %s", instruction)
        self.instructions.append(instruction)

    def new_temp(self) -> str:
        """
        Generate a new temporary variable.

        Returns:
            str: New temporary variable name
        """
        return self.temp_manager.new_temp()

    def get_instructions(self) -> List[Instruction]:
        """
        Get all generated TAC instructions.

        Returns:
            List[Instruction]: Generated instructions
        """
        return self.instructions.copy()

    def get_tac_code(self) -> str:
        """
        Get string representation of all TAC instructions.

        Returns:
            str: TAC code as string
        """
        return '\n'.join(str(instruction) for instruction in self.instructions)

    @abstractmethod
    def generate(self, tokens: List[Token], result_var: str) -> List[Instruction]:
        """
        Generate TAC for a token sequence.
        Must be implemented by concrete generators.

        Args:
            tokens: Tokens produced by the lexer
            result_var: Variable receiving the final value

        Returns:
            List[Instruction]: Emitted instructions
        """
        pass

    def reset(self) -> None:
        """Reset the generator to initial state."""
        self.instructions.clear()
        self.temp_manager.reset()

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get generation statistics.

        Returns:
            Dict[str, Any]: Statistics about generation process
        """
        return {
            'instructions_generated': len(self.instructions),
            'temporaries_used': self.temp_manager.get_temp_count(),
        }


class TACGenerationError(Exception):
    """Exception raised during TAC generation."""


class MalformedExpressionError(TACGenerationError):
    """Raised when an operator has fewer than two operands to consume."""

    def __init__(self, message: str, operator: Optional[str] = None,
                 position: Optional[int] = None):
        if position is not None:
            message = f"Token {position}: {message}"
        super().__init__(message)
        self.operator = operator
        self.position = position
