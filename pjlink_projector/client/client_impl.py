# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client.

Provides one coroutine per PJLink class 1 command. Every call opens its own
connection, performs a single command/response exchange, and closes the
connection before returning. No call raises for device or network failures;
each returns a PJLinkResult.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import ErrorKind, PJLinkProjectorError
from ..constants import DEFAULT_PORT
from ..pkg_logging import logger
from ..protocol import (
    PJLinkCommand,
    PowerStatus,
    MuteStatus,
    InputType,
    AvMuteSetting,
    LampInfo,
    ErrorStatusReport,
    decode_power_status,
    decode_mute_status,
    extract_value,
    parse_lamp_info,
    parse_error_status,
  )
from ..protocol.command_meta import INPT, AVMT, POWR, ERST, LAMP, NAME, INF1, INF2, INFO, CLSS
from ..result import PJLinkResult

from .client_config import PJLinkProjectorClientConfig
from .connector import PJLinkProjectorConnector
from .tcp_connector import TcpPJLinkProjectorConnector
from .exchange import pjlink_exchange

class PJLinkProjectorClient:
    """PJLink Projector client.

    The client is not safe for concurrent use by several tasks if the
    retained status values matter; concurrent calls open independent
    connections and their ordering is up to the projector.
    """

    connector: PJLinkProjectorConnector

    power_status: PowerStatus = PowerStatus.UNRECOGNIZED
    """The last recognized power status. Unrecognized responses leave it unchanged."""

    mute_status: MuteStatus = MuteStatus.UNRECOGNIZED
    """The last recognized mute status. Unrecognized responses leave it unchanged."""

    last_error: Optional[str] = None
    """Message from the most recent failed call."""

    last_error_kind: Optional[ErrorKind] = None
    """Kind of the most recent failed call."""

    def __init__(
            self,
            connector: Optional[PJLinkProjectorConnector]=None,
            config: Optional[PJLinkProjectorClientConfig]=None,
          ):
        if connector is None:
            connector = TcpPJLinkProjectorConnector(config=config)
        self.connector = connector

    @classmethod
    def create(
            cls,
            host: str,
            password: Optional[str]=None,
            port: int=DEFAULT_PORT,
            timeout_secs: Optional[float]=None,
          ) -> Self:
        """Creates a client for a projector reachable over TCP/IP. Does not connect."""
        connector = TcpPJLinkProjectorConnector(
            host,
            password=password,
            port=port,
            timeout_secs=timeout_secs,
          )
        return cls(connector)

    async def transact(
            self,
            command: Union[PJLinkCommand, str],
          ) -> PJLinkResult[str]:
        """Sends a command on a new connection and returns the trimmed raw response."""
        result = await pjlink_exchange(self.connector, command)
        if result.is_err:
            self._record_error(result, str(command))
        return result

    def _record_error(self, result: PJLinkResult[Any], what: str) -> None:
        self.last_error = result.error_message
        self.last_error_kind = result.error_kind
        logger.warning(f"{self}: {what!r} failed: {result.error_message}")

    async def _query_value(self, code: str) -> PJLinkResult[str]:
        result = await self.transact(PJLinkCommand.query(code))
        return result.map(extract_value)

    # Power

    async def power_on(self) -> PJLinkResult[str]:
        """Turns the projector on. Returns the raw response."""
        return await self.transact(PJLinkCommand.power_on())

    async def power_off(self) -> PJLinkResult[str]:
        """Turns the projector off. Returns the raw response."""
        return await self.transact(PJLinkCommand.power_off())

    async def get_power_status(self) -> PJLinkResult[PowerStatus]:
        """Queries the power status.

        An unrecognized response returns the previously recognized status.
        """
        result = await self.transact(PJLinkCommand.query(POWR))
        if result.is_ok:
            status = decode_power_status(result.value or '')
            if status == PowerStatus.UNRECOGNIZED:
                logger.debug(f"{self}: Unrecognized power status {result.value!r}; keeping {self.power_status}")
            else:
                self.power_status = status
        return result.map(lambda _: self.power_status)

    # Input

    async def get_input(self) -> PJLinkResult[str]:
        """Returns the two-digit selector of the current input, e.g. "31"."""
        return await self._query_value(INPT)

    async def set_input(self, input_type: Union[InputType, int], index: int) -> PJLinkResult[str]:
        """Selects an input by type and index (1-9)."""
        try:
            command = PJLinkCommand.select_input(input_type, index)
        except PJLinkProjectorError as e:
            result: PJLinkResult[str] = PJLinkResult.from_exception(e)
            self._record_error(result, f"input {input_type!r} {index!r}")
            return result
        return await self.transact(command)

    async def input_rgb(self, index: int) -> PJLinkResult[str]:
        return await self.set_input(InputType.RGB, index)

    async def input_video(self, index: int) -> PJLinkResult[str]:
        return await self.set_input(InputType.VIDEO, index)

    async def input_digital(self, index: int) -> PJLinkResult[str]:
        return await self.set_input(InputType.DIGITAL, index)

    async def input_storage(self, index: int) -> PJLinkResult[str]:
        return await self.set_input(InputType.STORAGE, index)

    async def input_network(self, index: int) -> PJLinkResult[str]:
        return await self.set_input(InputType.NETWORK, index)

    # AV mute

    async def av_mute(self, setting: AvMuteSetting) -> PJLinkResult[str]:
        return await self.transact(PJLinkCommand.av_mute(setting))

    async def av_shutter_open(self) -> PJLinkResult[str]:
        return await self.av_mute(AvMuteSetting.SHUTTER_OPEN)

    async def av_shutter_close(self) -> PJLinkResult[str]:
        return await self.av_mute(AvMuteSetting.SHUTTER_CLOSED)

    async def audio_mute_on(self) -> PJLinkResult[str]:
        return await self.av_mute(AvMuteSetting.AUDIO_MUTE_ON)

    async def audio_mute_off(self) -> PJLinkResult[str]:
        return await self.av_mute(AvMuteSetting.AUDIO_MUTE_OFF)

    async def video_mute_on(self) -> PJLinkResult[str]:
        return await self.av_mute(AvMuteSetting.VIDEO_MUTE_ON)

    async def video_mute_off(self) -> PJLinkResult[str]:
        return await self.av_mute(AvMuteSetting.VIDEO_MUTE_OFF)

    async def get_mute_status(self) -> PJLinkResult[MuteStatus]:
        """Queries the audio/video mute status.

        An unrecognized response returns the previously recognized status.
        """
        result = await self.transact(PJLinkCommand.query(AVMT))
        if result.is_ok:
            status = decode_mute_status(result.value or '')
            if status == MuteStatus.UNRECOGNIZED:
                logger.debug(f"{self}: Unrecognized mute status {result.value!r}; keeping {self.mute_status}")
            else:
                self.mute_status = status
        return result.map(lambda _: self.mute_status)

    # Errors and lamps

    async def get_error_status(self) -> PJLinkResult[str]:
        """Returns the six-digit error status, e.g. "000000"."""
        return await self._query_value(ERST)

    async def get_error_report(self) -> PJLinkResult[ErrorStatusReport]:
        """Returns the error status decoded per component."""
        return await self._query_parsed(ERST, parse_error_status)

    async def get_lamp_info(self) -> PJLinkResult[str]:
        """Returns lamp hours and state, e.g. "00123 1"."""
        return await self._query_value(LAMP)

    async def get_lamps(self) -> PJLinkResult[List[LampInfo]]:
        """Returns hours and on/off state for each lamp."""
        return await self._query_parsed(LAMP, parse_lamp_info)

    # Information

    async def get_projector_name(self) -> PJLinkResult[str]:
        return await self._query_value(NAME)

    async def get_manufacturer(self) -> PJLinkResult[str]:
        return await self._query_value(INF1)

    async def get_model(self) -> PJLinkResult[str]:
        return await self._query_value(INF2)

    async def get_other_info(self) -> PJLinkResult[str]:
        return await self._query_value(INFO)

    async def get_pjlink_class(self) -> PJLinkResult[str]:
        return await self._query_value(CLSS)

    async def _query_parsed(self, code: str, parser: Callable[[str], Any]) -> PJLinkResult[Any]:
        result = await self._query_value(code)
        if result.is_err:
            return result
        value = result.value or ''
        try:
            return PJLinkResult.ok(parser(value))
        except PJLinkProjectorError as e:
            # ERRn codes land here too; they are not parseable values
            parsed: PJLinkResult[Any] = PJLinkResult.from_exception(e)
            self._record_error(parsed, code)
            return parsed

    def __str__(self) -> str:
        return f"PJLinkProjectorClient(connector={self.connector})"

    def __repr__(self) -> str:
       return str(self)
