import os
import unittest
from unittest import mock

from pjlink_projector import (
    DEFAULT_PORT,
    PJLinkProjectorClientConfig,
    PJLinkProjectorError,
    PJLinkTimeoutError,
    PJLinkResult,
    ErrorKind,
    TcpPJLinkProjectorConnector,
    pjlink_projector_client,
    resolve_projector_tcp_host,
)

CLEAN_ENV = {
    'PJLINK_PROJECTOR_HOST': '',
    'PJLINK_PROJECTOR_PORT': '',
    'PJLINK_PROJECTOR_PASSWORD': '',
}


@mock.patch.dict(os.environ, CLEAN_ENV)
class ResolveHostTests(unittest.TestCase):

    def test_default_port(self):
        self.assertEqual(resolve_projector_tcp_host('10.0.0.5'), ('10.0.0.5', 4352))
        self.assertEqual(DEFAULT_PORT, 4352)

    def test_port_override(self):
        self.assertEqual(resolve_projector_tcp_host('10.0.0.5', 5000), ('10.0.0.5', 5000))
        self.assertEqual(resolve_projector_tcp_host('tcp://10.0.0.5:4353', 5000), ('10.0.0.5', 4353))

    def test_environment(self):
        with mock.patch.dict(os.environ, {'PJLINK_PROJECTOR_HOST': 'proj.local', 'PJLINK_PROJECTOR_PORT': '4999'}):
            self.assertEqual(resolve_projector_tcp_host(), ('proj.local', 4999))

    def test_errors(self):
        for host in (None, 'http://10.0.0.5', '10.0.0.5:abc', '10.0.0.5:70000', ':4352'):
            with self.assertRaises(PJLinkProjectorError):
                resolve_projector_tcp_host(host)


@mock.patch.dict(os.environ, CLEAN_ENV)
class ClientConfigTests(unittest.TestCase):

    def test_defaults(self):
        config = PJLinkProjectorClientConfig()
        self.assertIsNone(config.default_host)
        self.assertEqual(config.default_port, 4352)
        self.assertEqual(config.password, '')
        self.assertEqual(config.connect_timeout_secs, 1.0)
        self.assertEqual(config.settle_delay_secs, 1.5)

    def test_environment(self):
        env = {'PJLINK_PROJECTOR_HOST': '10.1.1.1', 'PJLINK_PROJECTOR_PASSWORD': 'secret'}
        with mock.patch.dict(os.environ, env):
            config = PJLinkProjectorClientConfig()
        self.assertEqual(config.default_host, '10.1.1.1')
        self.assertEqual(config.password, 'secret')

    def test_base_config_layering(self):
        base = PJLinkProjectorClientConfig('10.1.1.1', 'secret', settle_delay_secs=0.0)
        config = PJLinkProjectorClientConfig(default_port=5000, base_config=base)
        self.assertEqual(config.default_host, '10.1.1.1')
        self.assertEqual(config.password, 'secret')
        self.assertEqual(config.default_port, 5000)
        self.assertEqual(config.settle_delay_secs, 0.0)

    def test_disable_read_timeout(self):
        self.assertIsNone(PJLinkProjectorClientConfig(timeout_secs=0).timeout_secs)

    def test_invalid_values(self):
        with self.assertRaises(PJLinkProjectorError):
            PJLinkProjectorClientConfig(settle_delay_secs=-1)
        with self.assertRaises(PJLinkProjectorError):
            PJLinkProjectorClientConfig(receive_buffer_size=0)

    def test_jsonable(self):
        config = PJLinkProjectorClientConfig.from_jsonable(
            {'default_host': '10.2.2.2', 'password': 'pw', 'default_port': 4400, 'settle_delay_secs': 0.5})
        self.assertEqual(config.default_host, '10.2.2.2')
        self.assertEqual(config.default_port, 4400)
        self.assertEqual(config.settle_delay_secs, 0.5)
        jsonable = config.to_jsonable()
        self.assertNotIn('password', jsonable)
        self.assertEqual(jsonable['default_host'], '10.2.2.2')
        with self.assertRaises(PJLinkProjectorError):
            PJLinkProjectorClientConfig.from_jsonable({'default_port': '4352'})

    def test_connector_requires_host(self):
        with self.assertRaises(PJLinkProjectorError):
            TcpPJLinkProjectorConnector()

    def test_simple_client(self):
        client = pjlink_projector_client('10.3.3.3:4000', password='pw')
        self.assertEqual(client.connector.host, '10.3.3.3')
        self.assertEqual(client.connector.port, 4000)
        self.assertEqual(client.connector.config.password, 'pw')


class ResultTests(unittest.TestCase):

    def test_ok(self):
        result = PJLinkResult.ok('%1POWR=1')
        self.assertTrue(result.is_ok)
        self.assertFalse(result.is_err)
        self.assertEqual(result.unwrap(), '%1POWR=1')
        self.assertEqual(result.map(len).value, 8)

    def test_err(self):
        result = PJLinkResult.err(ErrorKind.TIMEOUT, 'timed out')
        self.assertTrue(result.is_err)
        self.assertEqual(result.map(len), result)
        with self.assertRaises(PJLinkTimeoutError):
            result.unwrap()
        self.assertEqual(str(result), "Err(TIMEOUT, 'timed out')")

    def test_from_exception(self):
        self.assertEqual(
            PJLinkResult.from_exception(OSError('boom')),
            PJLinkResult.err(ErrorKind.TRANSPORT, 'boom'))
