#!/usr/bin/env python3

"""
PJLink class 1 command codes and response metadata.

This module contains the known command codes and response tables for the PJLink
class 1 protocol. The information in this module is derived from the JBMIA
PJLink specification:

https://pjlink.jbmia.or.jp/english/data_cl2/PJLink_5-1.pdf

There is no protocol implementation here; only metadata about the protocol.
"""
from __future__ import annotations

from enum import Enum, IntEnum

from ..internal_types import *

CommandCode = str

POWR: CommandCode = "POWR"
"""Power control and power status query."""

INPT: CommandCode = "INPT"
"""Input switch and input status query."""

AVMT: CommandCode = "AVMT"
"""Audio/video mute control and mute status query."""

ERST: CommandCode = "ERST"
"""Error status query."""

LAMP: CommandCode = "LAMP"
"""Lamp count and lighting hours query."""

NAME: CommandCode = "NAME"
"""Projector name query."""

INF1: CommandCode = "INF1"
"""Manufacturer name query."""

INF2: CommandCode = "INF2"
"""Product name query."""

INFO: CommandCode = "INFO"
"""Other information query."""

CLSS: CommandCode = "CLSS"
"""PJLink class information query."""

all_command_codes: List[CommandCode] = [
    POWR, INPT, AVMT, ERST, LAMP, NAME, INF1, INF2, INFO, CLSS,
  ]

QUERY_PARAM = "?"
"""The parameter sent with every query command."""

MAX_PARAM_LENGTH = 128
"""The maximum length of a class 1 command parameter."""

class PowerStatus(Enum):
    """Power state reported by POWR ?"""
    OFF = "Off"
    ON = "On"
    COOLING = "Cooling"
    WARM_UP = "Warm Up"
    UNAVAILABLE = "Unavailable"
    PROJECTOR_FAILURE = "Projector Failure"
    UNRECOGNIZED = "Unrecognized"

class MuteStatus(Enum):
    """Mute state reported by AVMT ?"""
    VIDEO_MUTE_OFF = "Video Mute Off"
    VIDEO_MUTE_ON = "Video Mute On"
    AUDIO_MUTE_OFF = "Audio Mute Off"
    AUDIO_MUTE_ON = "Audio Mute On"
    SHUTTER_OPEN = "Shutter Open"
    SHUTTER_CLOSED = "Shutter Closed"
    UNAVAILABLE = "Unavailable/In Standby"
    PROJECTOR_FAILURE = "Projector Failure"
    UNRECOGNIZED = "Unrecognized"

class InputType(IntEnum):
    """Input class; the first digit of a two-digit INPT selector."""
    RGB = 1
    VIDEO = 2
    DIGITAL = 3
    STORAGE = 4
    NETWORK = 5

MIN_INPUT_INDEX = 1
MAX_INPUT_INDEX = 9

class PJLinkErrorCode(Enum):
    """Error codes a projector may return in place of a value."""
    ERR1 = "Undefined command"
    ERR2 = "Out of parameter"
    ERR3 = "Unavailable time"
    ERR4 = "Projector/Display failure"

class AvMuteSetting(Enum):
    """Parameters for the AVMT set command."""
    VIDEO_MUTE_OFF = "10"
    VIDEO_MUTE_ON = "11"
    AUDIO_MUTE_OFF = "20"
    AUDIO_MUTE_ON = "21"
    SHUTTER_OPEN = "30"
    SHUTTER_CLOSED = "31"

POWER_ON_PARAM = "1"
POWER_OFF_PARAM = "0"

power_status_map: Dict[str, PowerStatus] = {
    "%1POWR=0": PowerStatus.OFF,
    "%1POWR=1": PowerStatus.ON,
    "%1POWR=2": PowerStatus.COOLING,
    "%1POWR=3": PowerStatus.WARM_UP,
    "%1POWR=ERR3": PowerStatus.UNAVAILABLE,
    "%1POWR=ERR4": PowerStatus.PROJECTOR_FAILURE,
  }
"""Complete POWR ? responses, and the power states they correspond to."""

mute_status_map: Dict[str, MuteStatus] = {
    "%1AVMT=10": MuteStatus.VIDEO_MUTE_OFF,
    "%1AVMT=11": MuteStatus.VIDEO_MUTE_ON,
    "%1AVMT=20": MuteStatus.AUDIO_MUTE_OFF,
    "%1AVMT=21": MuteStatus.AUDIO_MUTE_ON,
    "%1AVMT=30": MuteStatus.SHUTTER_OPEN,
    "%1AVMT=31": MuteStatus.SHUTTER_CLOSED,
    "%1AVMT=ERR3": MuteStatus.UNAVAILABLE,
    "%1AVMT=ERR4": MuteStatus.PROJECTOR_FAILURE,
  }
"""Complete AVMT ? responses, and the mute states they correspond to."""

class ErrorLevel(Enum):
    """Severity of one ERST component digit."""
    OK = "0"
    WARNING = "1"
    ERROR = "2"

error_status_components: List[str] = [
    "fan",
    "lamp",
    "temperature",
    "cover_open",
    "filter",
    "other",
  ]
"""Names of the six ERST digits, in wire order."""
