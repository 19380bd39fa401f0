TEMP_PREFIX = "t"


def is_temporary(var_name: str, prefix: str = TEMP_PREFIX) -> bool:
    """
    Check if a variable name looks like a temporary.

    Args:
        var_name: Variable name to check
        prefix: Temporary name prefix

    Returns:
        bool: True if the name has the ``<prefix><N>`` shape
    """
    return var_name.startswith(prefix) and var_name[len(prefix):].isdigit()


class TemporaryManager:
    """
    Hands out temporary variable names for TAC generation.

    Names are never recycled: each call to ``new_temp`` returns the next
    ``t<N>`` in sequence, starting from ``t1``.
    """

    def __init__(self, prefix: str = TEMP_PREFIX):
        self._prefix = prefix
        self._temp_counter = 0

    def new_temp(self) -> str:
        """
        Allocate a new temporary variable.

        Returns:
            str: Temporary variable name (e.g., 't1', 't2', etc.)
        """
        self._temp_counter += 1
        return f"{self._prefix}{self._temp_counter}"

    def is_temporary(self, var_name: str) -> bool:
        return is_temporary(var_name, self._prefix)

    def get_temp_count(self) -> int:
        return self._temp_counter

    def reset(self) -> None:
        """Start numbering again from ``t1``."""
        self._temp_counter = 0
