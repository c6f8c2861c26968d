import asyncio
import socket
import time
import unittest

from pjlink_projector import (
    ErrorKind,
    ErrorLevel,
    InputType,
    LampInfo,
    MuteStatus,
    PowerStatus,
    PJLinkProjectorClient,
    PJLinkProjectorClientConfig,
    PJLinkProjectorError,
    TcpPJLinkProjectorConnector,
)
from pjlink_projector.emulator import PJLinkProjectorEmulator


def make_client(port, password=None, timeout_secs=2.0, settle_delay_secs=0.0):
    config = PJLinkProjectorClientConfig(
        default_host=f'127.0.0.1:{port}',
        password='' if password is None else password,
        timeout_secs=timeout_secs,
        settle_delay_secs=settle_delay_secs,
    )
    return PJLinkProjectorClient(config=config)


async def wait_for_sessions_closed(emulator, timeout=2.0):
    deadline = time.monotonic() + timeout
    while len(emulator.sessions) > 0 and time.monotonic() < deadline:
        await asyncio.sleep(0.01)
    return len(emulator.sessions) == 0


def unused_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        return sock.getsockname()[1]


class EmulatedProjectorTestCase(unittest.IsolatedAsyncioTestCase):
    password = None

    async def asyncSetUp(self):
        self.emulator = PJLinkProjectorEmulator(
            password=self.password, bind_addr='127.0.0.1', port=0, name='Room 204 Projector')
        await self.emulator.start()
        self.client = make_client(self.emulator.port, password=self.password)

    async def asyncTearDown(self):
        await self.emulator.aclose()


class PowerTests(EmulatedProjectorTestCase):

    async def test_power_cycle(self):
        result = await self.client.get_power_status()
        self.assertTrue(result.is_ok)
        self.assertEqual(result.value, PowerStatus.OFF)

        result = await self.client.power_on()
        self.assertEqual(result.value, '%1POWR=OK')
        self.assertEqual((await self.client.get_power_status()).value, PowerStatus.ON)

        await self.client.power_off()
        self.assertEqual((await self.client.get_power_status()).value, PowerStatus.OFF)
        self.assertEqual(self.emulator.received_lines[1], '%1POWR 1')
        self.assertEqual(self.emulator.received_lines[3], '%1POWR 0')

    async def test_one_connection_per_operation(self):
        await self.client.power_on()
        await self.client.get_power_status()
        await self.client.get_projector_name()
        self.assertEqual(self.emulator.connection_count, 3)
        self.assertTrue(await wait_for_sessions_closed(self.emulator))
        self.assertEqual(self.emulator.closed_count, 3)

    async def test_error_codes_decode(self):
        self.emulator.response_overrides['POWR'] = '%1POWR=ERR3'
        self.assertEqual((await self.client.get_power_status()).value, PowerStatus.UNAVAILABLE)
        self.emulator.response_overrides['POWR'] = '%1POWR=ERR4'
        self.assertEqual((await self.client.get_power_status()).value, PowerStatus.PROJECTOR_FAILURE)
        self.assertIsNone(self.client.last_error)

    async def test_unrecognized_keeps_previous(self):
        await self.client.power_on()
        self.emulator.power = '2'
        self.assertEqual((await self.client.get_power_status()).value, PowerStatus.COOLING)
        self.emulator.response_overrides['POWR'] = '%1POWR=7'
        result = await self.client.get_power_status()
        self.assertTrue(result.is_ok)
        self.assertEqual(result.value, PowerStatus.COOLING)
        self.assertEqual(self.client.power_status, PowerStatus.COOLING)


class InputTests(EmulatedProjectorTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.emulator.power = '1'

    async def test_set_and_get_input(self):
        result = await self.client.set_input(InputType.DIGITAL, 2)
        self.assertEqual(result.value, '%1INPT=OK')
        self.assertEqual((await self.client.get_input()).value, '32')
        await self.client.input_rgb(1)
        self.assertEqual(self.emulator.input_selector, '11')
        await self.client.input_video(1)
        self.assertEqual(self.emulator.input_selector, '21')
        await self.client.input_storage(1)
        self.assertEqual(self.emulator.input_selector, '41')
        await self.client.input_network(1)
        self.assertEqual(self.emulator.input_selector, '51')
        await self.client.input_digital(1)
        self.assertEqual(self.emulator.input_selector, '31')

    async def test_unavailable_input_is_a_value(self):
        result = await self.client.input_video(9)
        self.assertTrue(result.is_ok)
        self.assertEqual(result.value, '%1INPT=ERR2')

    async def test_invalid_input_never_connects(self):
        result = await self.client.set_input(7, 1)
        self.assertEqual(result.error_kind, ErrorKind.INVALID_PARAMETER)
        result = await self.client.input_rgb(10)
        self.assertEqual(result.error_kind, ErrorKind.INVALID_PARAMETER)
        self.assertEqual(self.client.last_error_kind, ErrorKind.INVALID_PARAMETER)
        self.assertEqual(self.emulator.connection_count, 0)

    async def test_input_in_standby(self):
        self.emulator.power = '0'
        self.assertEqual((await self.client.get_input()).value, 'ERR3')


class MuteTests(EmulatedProjectorTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.emulator.power = '1'

    async def test_mute_controls(self):
        expected = [
            (self.client.av_shutter_close, '31', MuteStatus.SHUTTER_CLOSED),
            (self.client.av_shutter_open, '30', MuteStatus.SHUTTER_OPEN),
            (self.client.audio_mute_on, '21', MuteStatus.AUDIO_MUTE_ON),
            (self.client.audio_mute_off, '20', MuteStatus.AUDIO_MUTE_OFF),
            (self.client.video_mute_on, '11', MuteStatus.VIDEO_MUTE_ON),
            (self.client.video_mute_off, '10', MuteStatus.VIDEO_MUTE_OFF),
        ]
        for operation, code, status in expected:
            result = await operation()
            self.assertEqual(result.value, '%1AVMT=OK')
            self.assertEqual(self.emulator.av_mute, code)
            self.assertEqual((await self.client.get_mute_status()).value, status)

    async def test_unmapped_mute_status_keeps_previous(self):
        await self.client.video_mute_on()
        self.assertEqual((await self.client.get_mute_status()).value, MuteStatus.VIDEO_MUTE_ON)
        self.emulator.response_overrides['AVMT'] = '%1AVMT=99'
        result = await self.client.get_mute_status()
        self.assertEqual(result.value, MuteStatus.VIDEO_MUTE_ON)
        self.assertEqual(self.client.mute_status, MuteStatus.VIDEO_MUTE_ON)

    async def test_mute_status_in_standby(self):
        self.emulator.power = '0'
        self.assertEqual((await self.client.get_mute_status()).value, MuteStatus.UNAVAILABLE)


class InformationTests(EmulatedProjectorTestCase):

    async def test_identification(self):
        self.assertEqual((await self.client.get_projector_name()).value, 'Room 204 Projector')
        self.assertEqual((await self.client.get_manufacturer()).value, 'PJLink Emulator')
        self.assertEqual((await self.client.get_model()).value, 'EMU-1')
        self.assertEqual((await self.client.get_other_info()).value, '')
        self.assertEqual((await self.client.get_pjlink_class()).value, '1')

    async def test_lamp(self):
        self.emulator.power = '1'
        self.assertEqual((await self.client.get_lamp_info()).value, '01234 1')
        self.assertEqual((await self.client.get_lamps()).value, [LampInfo(1234, True)])

    async def test_error_status(self):
        self.emulator.error_status = '020001'
        self.assertEqual((await self.client.get_error_status()).value, '020001')
        report = (await self.client.get_error_report()).unwrap()
        self.assertEqual(report.lamp, ErrorLevel.ERROR)
        self.assertEqual(report.other, ErrorLevel.WARNING)

    async def test_unparseable_error_status(self):
        self.emulator.response_overrides['ERST'] = '%1ERST=ERR4'
        self.assertEqual((await self.client.get_error_status()).value, 'ERR4')
        result = await self.client.get_error_report()
        self.assertEqual(result.error_kind, ErrorKind.PROTOCOL)
        with self.assertRaises(PJLinkProjectorError):
            result.unwrap()


class AuthenticationTests(EmulatedProjectorTestCase):
    password = 'JBMIAProjectorLink'

    async def test_authenticated_commands(self):
        result = await self.client.power_on()
        self.assertTrue(result.is_ok)
        self.assertEqual(self.emulator.power, '1')
        self.assertEqual((await self.client.get_power_status()).value, PowerStatus.ON)
        for line in self.emulator.received_lines:
            self.assertEqual(len(line), 32 + len('%1POWR ?'))

    async def test_wrong_password(self):
        client = make_client(self.emulator.port, password='wrong')
        result = await client.power_on()
        self.assertEqual(result.error_kind, ErrorKind.AUTHENTICATION)
        self.assertEqual(client.last_error_kind, ErrorKind.AUTHENTICATION)
        self.assertEqual(self.emulator.power, '0')

    async def test_missing_password(self):
        client = make_client(self.emulator.port, password='')
        result = await client.get_power_status()
        self.assertEqual(result.error_kind, ErrorKind.AUTHENTICATION)


class FailureTests(EmulatedProjectorTestCase):

    async def test_read_timeout_closes_connection(self):
        client = make_client(self.emulator.port, timeout_secs=0.2)
        self.emulator.silent_codes.add('NAME')
        result = await client.get_projector_name()
        self.assertEqual(result.error_kind, ErrorKind.TIMEOUT)
        self.assertEqual(client.last_error, result.error_message)
        self.assertTrue(await wait_for_sessions_closed(self.emulator))

    async def test_last_error_retained_until_next_failure(self):
        client = make_client(self.emulator.port, timeout_secs=0.2)
        self.emulator.silent_codes.add('NAME')
        await client.get_projector_name()
        first_error = client.last_error
        self.assertIsNotNone(first_error)
        await client.get_model()
        self.assertEqual(client.last_error, first_error)

    async def test_settle_delay(self):
        client = make_client(self.emulator.port, settle_delay_secs=0.3)
        start = time.monotonic()
        await client.get_power_status()
        self.assertGreaterEqual(time.monotonic() - start, 0.25)


class UnreachableTests(unittest.IsolatedAsyncioTestCase):

    async def test_no_listener(self):
        client = make_client(unused_port())
        start = time.monotonic()
        result = await client.get_power_status()
        self.assertLess(time.monotonic() - start, 2.0)
        self.assertTrue(result.is_err)
        self.assertEqual(result.error_kind, ErrorKind.UNREACHABLE)
        self.assertIn('Check the projector IP address', result.error_message)
        self.assertNotIn('Traceback', result.error_message)
        self.assertEqual(client.power_status, PowerStatus.UNRECOGNIZED)


class RecordingConnector(TcpPJLinkProjectorConnector):
    """ Keeps every transport it creates so tests can inspect the socket afterwards. """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.transports = []

    def new_transport(self):
        transport = super().new_transport()
        self.transports.append(transport)
        return transport


class TeardownTests(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.emulator = PJLinkProjectorEmulator(bind_addr='127.0.0.1', port=0)
        await self.emulator.start()

    async def asyncTearDown(self):
        await self.emulator.aclose()

    def make_recording_client(self, settle_delay_secs, timeout_secs=2.0):
        config = PJLinkProjectorClientConfig(
            default_host=f'127.0.0.1:{self.emulator.port}',
            password='',
            timeout_secs=timeout_secs,
            settle_delay_secs=settle_delay_secs,
        )
        connector = RecordingConnector(config=config)
        return connector, PJLinkProjectorClient(connector=connector)

    async def test_cancel_during_settle_delay_closes_socket(self):
        connector, client = self.make_recording_client(settle_delay_secs=1.5)
        with self.assertRaises(asyncio.TimeoutError):
            await asyncio.wait_for(client.get_power_status(), 0.3)
        self.assertEqual(len(connector.transports), 1)
        transport = connector.transports[0]
        self.assertTrue(transport.closed)
        self.assertTrue(transport.writer.is_closing())
        self.assertTrue(await wait_for_sessions_closed(self.emulator))

    async def test_cancel_while_waiting_for_response_closes_socket(self):
        connector, client = self.make_recording_client(settle_delay_secs=0.0)
        self.emulator.silent_codes.add('POWR')
        with self.assertRaises(asyncio.TimeoutError):
            await asyncio.wait_for(client.get_power_status(), 0.3)
        transport = connector.transports[0]
        self.assertTrue(transport.writer.is_closing())
        self.assertTrue(await wait_for_sessions_closed(self.emulator))

    async def test_bad_greeting_closes_socket(self):
        connector, client = self.make_recording_client(settle_delay_secs=0.0)
        self.emulator.greeting_override = 'HELLO'
        result = await client.get_power_status()
        self.assertEqual(result.error_kind, ErrorKind.PROTOCOL)
        self.assertEqual(self.emulator.connection_count, 1)
        transport = connector.transports[0]
        self.assertTrue(transport.closed)
        self.assertTrue(transport.writer.is_closing())
        self.assertTrue(await wait_for_sessions_closed(self.emulator))
        self.assertEqual(self.emulator.received_lines, [])

    async def test_greeting_timeout_closes_socket(self):
        connector, client = self.make_recording_client(settle_delay_secs=0.0, timeout_secs=0.2)
        self.emulator.greeting_override = ''
        result = await client.get_power_status()
        self.assertEqual(result.error_kind, ErrorKind.TIMEOUT)
        transport = connector.transports[0]
        self.assertTrue(transport.writer.is_closing())
        self.assertTrue(await wait_for_sessions_closed(self.emulator))
