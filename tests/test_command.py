import unittest

from pjlink_projector import (
    PJLinkCommand,
    InputType,
    AvMuteSetting,
    PJLinkInvalidParameterError,
)
from pjlink_projector.protocol import input_selector


class CommandFormatTests(unittest.TestCase):

    def test_power_commands_are_byte_exact(self):
        self.assertEqual(PJLinkCommand.power_on().raw_data, b'%1POWR 1\r')
        self.assertEqual(PJLinkCommand.power_off().raw_data, b'%1POWR 0\r')

    def test_queries(self):
        for code in ('POWR', 'INPT', 'AVMT', 'ERST', 'LAMP', 'NAME', 'INF1', 'INF2', 'INFO', 'CLSS'):
            command = PJLinkCommand.query(code)
            self.assertTrue(command.is_query)
            self.assertEqual(str(command), f'%1{code} ?\r')

    def test_single_terminator(self):
        raw = PJLinkCommand.query('NAME').raw_data
        self.assertEqual(raw.count(b'\r'), 1)
        self.assertNotIn(b'\n', raw)
        self.assertTrue(raw.endswith(b'\r'))

    def test_input_selection(self):
        self.assertEqual(str(PJLinkCommand.select_input(InputType.RGB, 1)), '%1INPT 11\r')
        self.assertEqual(str(PJLinkCommand.select_input(InputType.VIDEO, 2)), '%1INPT 22\r')
        self.assertEqual(str(PJLinkCommand.select_input(InputType.DIGITAL, 1)), '%1INPT 31\r')
        self.assertEqual(str(PJLinkCommand.select_input(4, 3)), '%1INPT 43\r')
        self.assertEqual(str(PJLinkCommand.select_input(InputType.NETWORK, 9)), '%1INPT 59\r')

    def test_input_selection_out_of_range(self):
        for input_type, index in ((0, 1), (6, 1), (InputType.RGB, 0), (InputType.RGB, 10)):
            with self.assertRaises(PJLinkInvalidParameterError):
                input_selector(input_type, index)

    def test_input_index_must_be_an_integer(self):
        for index in (True, False, 1.0, '1', None):
            with self.assertRaises(PJLinkInvalidParameterError):
                PJLinkCommand.select_input(InputType.DIGITAL, index)

    def test_av_mute_commands(self):
        expected = {
            AvMuteSetting.VIDEO_MUTE_OFF: '%1AVMT 10\r',
            AvMuteSetting.VIDEO_MUTE_ON: '%1AVMT 11\r',
            AvMuteSetting.AUDIO_MUTE_OFF: '%1AVMT 20\r',
            AvMuteSetting.AUDIO_MUTE_ON: '%1AVMT 21\r',
            AvMuteSetting.SHUTTER_OPEN: '%1AVMT 30\r',
            AvMuteSetting.SHUTTER_CLOSED: '%1AVMT 31\r',
        }
        for setting, text in expected.items():
            self.assertEqual(str(PJLinkCommand.av_mute(setting)), text)

    def test_invalid_commands(self):
        with self.assertRaises(PJLinkInvalidParameterError):
            PJLinkCommand('POW')
        with self.assertRaises(PJLinkInvalidParameterError):
            PJLinkCommand('powr')
        with self.assertRaises(PJLinkInvalidParameterError):
            PJLinkCommand('NAME', 'x' * 129)
        with self.assertRaises(PJLinkInvalidParameterError):
            PJLinkCommand('NAME', '1\r')

    def test_response_prefix(self):
        self.assertEqual(PJLinkCommand.query('LAMP').response_prefix, '%1LAMP=')
