# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Automatically-managed version string for pjlink_projector"""

__version__ = "0.1.0"
