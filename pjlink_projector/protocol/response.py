# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Decoding of PJLink class 1 responses.

All functions take a response with the trailing padding already trimmed, e.g.,

    %1POWR=1

The status decoders are total: any response not in the table decodes to the
UNRECOGNIZED variant. Deciding what to do with an unrecognized response is
up to the caller.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PJLinkProtocolError
from .command_meta import (
    PowerStatus,
    MuteStatus,
    InputType,
    PJLinkErrorCode,
    ErrorLevel,
    power_status_map,
    mute_status_map,
    error_status_components,
  )

def decode_power_status(response: str) -> PowerStatus:
    """Decodes a complete POWR ? response by exact match."""
    return power_status_map.get(response, PowerStatus.UNRECOGNIZED)

def decode_mute_status(response: str) -> MuteStatus:
    """Decodes a complete AVMT ? response by exact match."""
    return mute_status_map.get(response, MuteStatus.UNRECOGNIZED)

def extract_value(response: str) -> str:
    """Returns everything after the last '=' in a response, verbatim.

    If there is no '=', the whole response is returned.
    """
    return response[response.rfind('=') + 1:]

def response_error_code(response: str) -> Optional[PJLinkErrorCode]:
    """Returns the error code carried by a response, or None if it carries a value."""
    value = extract_value(response)
    try:
        return PJLinkErrorCode[value]
    except KeyError:
        return None

def parse_input_selector(value: str) -> Tuple[InputType, int]:
    """Splits a two-digit INPT value into its input type and index."""
    if len(value) != 2 or not value.isdigit():
        raise PJLinkProtocolError(f"Invalid input selector: {value!r}")
    try:
        input_type = InputType(int(value[0]))
    except ValueError as e:
        raise PJLinkProtocolError(f"Unknown input type in selector: {value!r}") from e
    index = int(value[1])
    if index == 0:
        raise PJLinkProtocolError(f"Invalid input index in selector: {value!r}")
    return (input_type, index)

class LampInfo(NamedTuple):
    """Cumulative lighting hours and on/off state of one lamp."""
    hours: int
    is_on: bool

def parse_lamp_info(value: str) -> List[LampInfo]:
    """Parses a LAMP value of the form "<hours> <0|1>[ <hours> <0|1>...]"."""
    fields = value.split(' ')
    if len(fields) == 0 or len(fields) % 2 != 0:
        raise PJLinkProtocolError(f"Invalid lamp information: {value!r}")
    result: List[LampInfo] = []
    for i in range(0, len(fields), 2):
        hours_str, state_str = fields[i], fields[i+1]
        if not hours_str.isdigit() or state_str not in ('0', '1'):
            raise PJLinkProtocolError(f"Invalid lamp information: {value!r}")
        result.append(LampInfo(int(hours_str), state_str == '1'))
    return result

class ErrorStatusReport:
    """Per-component error levels decoded from an ERST value."""

    levels: Dict[str, ErrorLevel]

    def __init__(self, levels: Dict[str, ErrorLevel]) -> None:
        self.levels = levels

    @classmethod
    def parse(cls, value: str) -> ErrorStatusReport:
        """Parses the six-digit ERST value, e.g. "000120"."""
        if len(value) != len(error_status_components):
            raise PJLinkProtocolError(f"Invalid error status: {value!r}")
        levels: Dict[str, ErrorLevel] = {}
        for name, digit in zip(error_status_components, value):
            try:
                levels[name] = ErrorLevel(digit)
            except ValueError as e:
                raise PJLinkProtocolError(f"Invalid error status: {value!r}") from e
        return cls(levels)

    def __getattr__(self, name: str) -> ErrorLevel:
        levels = self.__dict__.get('levels')
        if levels is not None and name in levels:
            return levels[name]
        raise AttributeError(name)

    @property
    def has_errors(self) -> bool:
        return any(level == ErrorLevel.ERROR for level in self.levels.values())

    @property
    def has_warnings(self) -> bool:
        return any(level == ErrorLevel.WARNING for level in self.levels.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorStatusReport):
            return NotImplemented
        return self.levels == other.levels

    def __str__(self) -> str:
        items = ", ".join(f"{name}={level.name}" for name, level in self.levels.items())
        return f"ErrorStatusReport({items})"

    def __repr__(self) -> str:
        return str(self)

def parse_error_status(value: str) -> ErrorStatusReport:
    return ErrorStatusReport.parse(value)
