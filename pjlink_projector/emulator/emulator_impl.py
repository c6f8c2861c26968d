# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector emulator.

Provides a simple emulation of a PJLink class 1 projector on TCP/IP.
"""

from __future__ import annotations

import asyncio
import secrets

from ..internal_types import *
from ..pkg_logging import logger
from ..constants import DEFAULT_PORT
from ..protocol import (
    compute_digest,
    DIGEST_LENGTH,
    COMMAND_PREFIX,
    COMMAND_TERMINATOR,
    QUERY_PARAM,
    PJLINK_ERRA,
    AvMuteSetting,
  )
from ..protocol.command_meta import (
    POWR, INPT, AVMT, ERST, LAMP, NAME, INF1, INF2, INFO, CLSS,
    POWER_ON_PARAM, POWER_OFF_PARAM,
  )

from .session import PJLinkProjectorEmulatorSession


class PJLinkProjectorEmulator:
    """An emulated PJLink class 1 projector.

    State is kept per emulator, not per connection, so a value set on one
    connection is visible on the next, as with a real projector.

    For fault injection, response_overrides maps a command code to the
    complete response line (without terminator) to send instead of the
    normal one, and silent_codes lists command codes that get no response
    at all. If greeting_override is set, it is sent as the greeting line in
    place of the normal one; an empty string sends no greeting at all.
    """
    password: Optional[str]
    bind_addr: str
    port: int
    sessions: Dict[int, PJLinkProjectorEmulatorSession]
    next_session_id: int = 0
    requests: asyncio.Queue[Optional[Tuple[PJLinkProjectorEmulatorSession, str]]]
    server: Optional[asyncio.Server] = None
    handler_task: Optional[asyncio.Task[None]] = None

    power: str
    input_selector: str
    available_inputs: List[str]
    av_mute: str
    error_status: str
    lamp_hours: int
    name: str
    manufacturer: str
    model: str
    other_info: str
    pjlink_class: str

    response_overrides: Dict[str, str]
    silent_codes: Set[str]
    greeting_override: Optional[str] = None
    received_lines: List[str]
    connection_count: int = 0
    closed_count: int = 0

    def __init__(
            self,
            password: Optional[str]=None,
            bind_addr: Optional[str]=None,
            port: int=DEFAULT_PORT,
            name: str="Emulated Projector",
            manufacturer: str="PJLink Emulator",
            model: str="EMU-1",
          ):
        self.password = password
        self.bind_addr = '0.0.0.0' if bind_addr is None else bind_addr
        self.port = port
        self.sessions = {}
        self.requests = asyncio.Queue()
        self.power = POWER_OFF_PARAM
        self.input_selector = "31"
        self.available_inputs = ["11", "12", "21", "31", "32", "41", "51"]
        self.av_mute = AvMuteSetting.SHUTTER_OPEN.value
        self.error_status = "000000"
        self.lamp_hours = 1234
        self.name = name
        self.manufacturer = manufacturer
        self.model = model
        self.other_info = ""
        self.pjlink_class = "1"
        self.response_overrides = {}
        self.silent_codes = set()
        self.received_lines = []

    def new_challenge_seed(self) -> str:
        return secrets.token_hex(4)

    def alloc_session_id(self, session: PJLinkProjectorEmulatorSession) -> int:
        result = self.next_session_id
        self.next_session_id += 1
        self.connection_count += 1
        self.sessions[result] = session
        return result

    def free_session_id(self, session_id: int) -> None:
        if self.sessions.pop(session_id, None) is not None:
            self.closed_count += 1

    def on_line_received(self, session: PJLinkProjectorEmulatorSession, line: str) -> None:
        """Called when a CR-terminated line is received from a session."""
        self.received_lines.append(line)
        self.requests.put_nowait((session, line))

    def authenticate(self, session: PJLinkProjectorEmulatorSession, line: str) -> Optional[str]:
        """Checks and strips the digest on the first command of a secured session.

        Returns the command without its digest, or None if authentication failed.
        """
        if session.authenticated:
            return line
        assert session.challenge_seed is not None and self.password is not None
        expected = compute_digest(session.challenge_seed, self.password)
        if line[:DIGEST_LENGTH] != expected:
            logger.debug(f"{session}: Authentication failed")
            return None
        session.authenticated = True
        return line[DIGEST_LENGTH:]

    def handle_command(self, code: str, param: str) -> str:
        """Handles a single command and returns the response value (the text after '=')."""
        is_query = param == QUERY_PARAM
        powered = self.power == POWER_ON_PARAM
        if code == POWR:
            if is_query:
                return self.power
            if param == POWER_ON_PARAM:
                self.power = POWER_ON_PARAM
            elif param == POWER_OFF_PARAM:
                self.power = POWER_OFF_PARAM
            else:
                return "ERR2"
            return "OK"
        if code == INPT:
            if not powered:
                return "ERR3"
            if is_query:
                return self.input_selector
            if param not in self.available_inputs:
                return "ERR2"
            self.input_selector = param
            return "OK"
        if code == AVMT:
            if not powered:
                return "ERR3"
            if is_query:
                return self.av_mute
            if param not in [setting.value for setting in AvMuteSetting]:
                return "ERR2"
            self.av_mute = param
            return "OK"
        if not is_query:
            return "ERR1"
        if code == ERST:
            return self.error_status
        if code == LAMP:
            return f"{self.lamp_hours:05d} {'1' if powered else '0'}"
        if code == NAME:
            return self.name
        if code == INF1:
            return self.manufacturer
        if code == INF2:
            return self.model
        if code == INFO:
            return self.other_info
        if code == CLSS:
            return self.pjlink_class
        return "ERR1"

    def handle_request_line(self, session: PJLinkProjectorEmulatorSession, line: str) -> Optional[str]:
        """Handles one received line and returns the response line, or None for no response.

        If authentication fails, PJLINK ERRA is returned and the session is closed.
        """
        opt_command = self.authenticate(session, line)
        if opt_command is None:
            session.write((PJLINK_ERRA + COMMAND_TERMINATOR).encode('ascii'))
            session.close()
            return None
        command = opt_command
        if not command.startswith(COMMAND_PREFIX) or len(command) < 8 or command[6] != ' ':
            logger.debug(f"{session}: Malformed command {command!r}")
            return f"{COMMAND_PREFIX}{command[2:6]}=ERR1"
        code = command[2:6]
        param = command[7:]
        if code in self.silent_codes:
            logger.debug(f"{session}: Not responding to {code}")
            return None
        override = self.response_overrides.get(code)
        if override is not None:
            return override
        return f"{COMMAND_PREFIX}{code}={self.handle_command(code, param)}"

    async def handle_requests(self) -> None:
        """Handle requests from sessions."""
        while True:
            session_and_line = await self.requests.get()
            try:
                if session_and_line is None:
                    logger.debug("Emulator handler: Received EOF; exiting")
                    break
                session, line = session_and_line
                try:
                    logger.debug(f"{session}: Emulator handler: received line: {line!r}")
                    response = self.handle_request_line(session, line)
                    if response is not None:
                        session.write((response + COMMAND_TERMINATOR).encode('ascii'))
                except Exception as e:
                    logger.exception(f"{session}: Handler task: Exception while handling request; killing session: {e}")
                    session.close()
            finally:
                self.requests.task_done()

    async def start(self) -> None:
        loop = asyncio.get_running_loop()
        self.handler_task = asyncio.create_task(self.handle_requests())
        try:
            self.server = await loop.create_server(
                lambda: PJLinkProjectorEmulatorSession(self),
                host=self.bind_addr,
                port=self.port)
            # port 0 binds an ephemeral port
            self.port = self.server.sockets[0].getsockname()[1]
            logger.debug(f"Emulator: Listening on {self.bind_addr}:{self.port}")
        except BaseException:
            await self.aclose()
            raise

    async def aclose(self) -> None:
        """Stops the emulator and drops all sessions."""
        for session in list(self.sessions.values()):
            session.close()
        if self.server is not None:
            server = self.server
            self.server = None
            server.close()
            await server.wait_closed()
        if self.handler_task is not None:
            handler_task = self.handler_task
            self.handler_task = None
            self.requests.put_nowait(None)
            await handler_task

    async def __aenter__(self) -> PJLinkProjectorEmulator:
        await self.start()
        return self

    async def __aexit__(self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType]
      ) -> None:
        await self.aclose()

    def __str__(self) -> str:
        return f"PJLinkProjectorEmulator({self.bind_addr}:{self.port})"

    def __repr__(self) -> str:
        return str(self)
