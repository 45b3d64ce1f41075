"""Control instructions: what the descent engine does with each visited element."""

from __future__ import annotations

from typing import NamedTuple

from wend.exceptions import InvalidArgumentError


class Instruction(NamedTuple):
    """The decision a control function returns for one element.

    Attributes:
        emit: Yield the element (or its path).
        descend: Visit the element's children.
        continue_siblings: Keep going through the remaining candidates at
            this level once the element's subtree is done.
        reset_path: Start the children's path from empty instead of
            extending it with the element.
    """

    emit: bool
    descend: bool
    continue_siblings: bool
    reset_path: bool = False


EMIT_AND_CONTINUE = Instruction(emit=True, descend=True, continue_siblings=True)
EMIT = Instruction(emit=True, descend=False, continue_siblings=True)
EMIT_AND_CHAIN = Instruction(emit=True, descend=True, continue_siblings=False)
EMIT_AND_CUT = Instruction(emit=True, descend=False, continue_siblings=False)
CONTINUE = Instruction(emit=False, descend=True, continue_siblings=True)
IGNORE = Instruction(emit=False, descend=False, continue_siblings=True)
CHAIN = Instruction(emit=False, descend=True, continue_siblings=False)
CUT = Instruction(emit=False, descend=False, continue_siblings=False)

CONTROL_RETURN_VALUES: dict[str, Instruction] = {
    "emit_and_continue": EMIT_AND_CONTINUE,
    "emit": EMIT,
    "emit_and_chain": EMIT_AND_CHAIN,
    "emit_and_cut": EMIT_AND_CUT,
    "continue": CONTINUE,
    "ignore": IGNORE,
    "chain": CHAIN,
    "cut": CUT,
}


def reset_path(instruction: Instruction | str) -> Instruction:
    """Same instruction, but the children start with an empty path."""
    return coerce_instruction(instruction)._replace(reset_path=True)


def coerce_instruction(value: Instruction | str) -> Instruction:
    """Accept an :class:`Instruction` or the name of a preset."""
    if isinstance(value, Instruction):
        return value
    if isinstance(value, str):
        try:
            return CONTROL_RETURN_VALUES[value]
        except KeyError:
            pass
    msg = f"Control must return an Instruction or one of {sorted(CONTROL_RETURN_VALUES)}, got {value!r}"
    raise InvalidArgumentError(msg)


def default_control(path: object, element: object) -> Instruction:
    """Emit everything, descend everywhere."""
    return EMIT_AND_CONTINUE
