# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PJLinkInvalidParameterError
from .command_meta import (
    CommandCode,
    InputType,
    AvMuteSetting,
    QUERY_PARAM,
    MAX_PARAM_LENGTH,
    MIN_INPUT_INDEX,
    MAX_INPUT_INDEX,
    POWER_ON_PARAM,
    POWER_OFF_PARAM,
    POWR,
    INPT,
    AVMT,
  )

COMMAND_PREFIX = "%1"
"""Header and class digit that start every class 1 command."""

COMMAND_TERMINATOR = "\r"
"""The only line terminator used by PJLink."""

class PJLinkCommand:
    """A PJLink class 1 command.

    The raw form of a command is:

        %1<four_letter_code> <param>\r

    The authentication digest, if any, is not part of the command; it is
    prepended by the exchange when the connection requires it.
    """
    code: CommandCode
    param: str

    def __init__(self, code: CommandCode, param: str=QUERY_PARAM):
        if len(code) != 4 or not code.isalnum() or code.upper() != code:
            raise PJLinkInvalidParameterError(f"Invalid PJLink command code: {code!r}")
        if len(param) > MAX_PARAM_LENGTH:
            raise PJLinkInvalidParameterError(f"PJLink command parameter longer than {MAX_PARAM_LENGTH} characters: {param!r}")
        if COMMAND_TERMINATOR in param:
            raise PJLinkInvalidParameterError(f"PJLink command parameter contains a terminator: {param!r}")
        self.code = code
        self.param = param

    @property
    def is_query(self) -> bool:
        """Returns True iff the command is a status query"""
        return self.param == QUERY_PARAM

    @property
    def command_str(self) -> str:
        """Returns the full command text, including the terminator"""
        return f"{COMMAND_PREFIX}{self.code} {self.param}{COMMAND_TERMINATOR}"

    @property
    def raw_data(self) -> bytes:
        """Returns the ASCII bytes of the command"""
        return self.command_str.encode('ascii')

    @property
    def response_prefix(self) -> str:
        """Returns the text that starts a response to this command"""
        return f"{COMMAND_PREFIX}{self.code}="

    @classmethod
    def query(cls, code: CommandCode) -> Self:
        """Creates a status query command"""
        return cls(code, QUERY_PARAM)

    @classmethod
    def power_on(cls) -> Self:
        return cls(POWR, POWER_ON_PARAM)

    @classmethod
    def power_off(cls) -> Self:
        return cls(POWR, POWER_OFF_PARAM)

    @classmethod
    def select_input(cls, input_type: Union[InputType, int], index: int) -> Self:
        """Creates an input switch command.

        The selector is the two-digit <input_type><index> code; e.g.,
        InputType.DIGITAL, 1 selects input "31".
        """
        return cls(INPT, input_selector(input_type, index))

    @classmethod
    def av_mute(cls, setting: AvMuteSetting) -> Self:
        return cls(AVMT, setting.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PJLinkCommand):
            return NotImplemented
        return self.code == other.code and self.param == other.param

    def __hash__(self) -> int:
        return hash((self.code, self.param))

    def __str__(self) -> str:
        return self.command_str

    def __repr__(self) -> str:
        return f"PJLinkCommand({self.code} {self.param})"

def input_selector(input_type: Union[InputType, int], index: int) -> str:
    """Returns the two-digit INPT selector for an input type and index."""
    try:
        input_type = InputType(input_type)
    except ValueError as e:
        raise PJLinkInvalidParameterError(f"Invalid PJLink input type: {input_type!r}") from e
    if isinstance(index, bool) or not isinstance(index, int) or not MIN_INPUT_INDEX <= index <= MAX_INPUT_INDEX:
        raise PJLinkInvalidParameterError(
            f"PJLink input index must be between {MIN_INPUT_INDEX} and {MAX_INPUT_INDEX}: {index!r}")
    return f"{input_type.value}{index}"
