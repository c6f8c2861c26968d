import hashlib
import unittest

from pjlink_projector import compute_digest, PJLinkInvalidParameterError


class DigestTests(unittest.TestCase):

    def test_reference_vector_empty_password(self):
        """ An empty password still hashes the seed on its own. """
        self.assertEqual(compute_digest('abcdef', ''), 'e80b5017098950fc58aad83c8c14978e')

    def test_pjlink_reference_vector(self):
        """ The worked example from the PJLink specification. """
        self.assertEqual(
            compute_digest('498e4a67', 'JBMIAProjectorLink'),
            '5d8409bc1c3fa39749434aa3a5c38682')

    def test_matches_md5_of_concatenation(self):
        self.assertEqual(
            compute_digest('21d0e96e', 'ABC123'),
            hashlib.md5(b'21d0e96eABC123').hexdigest())

    def test_deterministic_lowercase_hex(self):
        first = compute_digest('0a1b2c3d', 'secret')
        second = compute_digest('0a1b2c3d', 'secret')
        self.assertEqual(first, second)
        self.assertEqual(len(first), 32)
        self.assertEqual(first, first.lower())
        int(first, 16)

    def test_changing_either_input_changes_digest(self):
        base = compute_digest('0a1b2c3d', 'secret')
        self.assertNotEqual(base, compute_digest('0a1b2c3e', 'secret'))
        self.assertNotEqual(base, compute_digest('0a1b2c3d', 'secreT'))

    def test_non_ascii_password_rejected(self):
        with self.assertRaises(PJLinkInvalidParameterError):
            compute_digest('0a1b2c3d', 'pässword')
