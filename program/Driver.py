import logging
import os
import sys

from tac.base_generator import TACGenerationError
from tac.ir_views import number_rows
from tac.pipeline import process_expression, derive_views


def print_section(title, rows):
    print(f"\n{title}")
    for row in rows:
        print(row)


def read_line(prompt):
    """Read one line; an exhausted stdin gives an empty string."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def resolve_log_level(name):
    """Map a level name to its number, WARNING for unknown names."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def main(argv):
    logging.basicConfig(
        level=resolve_log_level(os.environ.get("TAC_LOG_LEVEL", "WARNING")),
        format='%(levelname)s:%(name)s:%(lineno)d: %(message)s',
    )

    if len(argv) > 1:
        expression = argv[1]
    else:
        expression = read_line("Enter an expression: ")

    if len(argv) > 2:
        result_var = argv[2]
    else:
        result_var = read_line("Enter the variable to store the result: ")

    try:
        instructions = process_expression(expression, result_var)
    except TACGenerationError as e:
        print(f"✗ TAC generation error: {e}", file=sys.stderr)
        return 1

    views = derive_views(instructions)

    print_section("Three Address Code (TAC):", number_rows(views.tac, 1))
    print_section("Quadruples:", number_rows(views.quadruples, 1))
    print_section("Triples:", number_rows(views.triples, 0))

    print("\nIndirect Triples:")
    print("Pointer Table:")
    for row in views.indirect_triples.pointer_table:
        print(row)
    print_section("Instruction Table:", number_rows(views.indirect_triples.instruction_table, 0))

    return 0

if __name__ == '__main__':
    sys.exit(main(sys.argv))
