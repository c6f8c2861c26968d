# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client abstract transport connector interface.

Provides a low-level abstract interface for objects that can create
transport connections (including reading the greeting) to a PJLink
projector. Every transaction uses a brand new transport from the connector.
This abstraction allows for alternate network transports and fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from .client_transport import PJLinkClientTransport

class PJLinkProjectorConnector(ABC):
    """Abstract base class for PJLink Projector client transport connectors."""

    @abstractmethod
    async def connect(self) -> PJLinkClientTransport:
        """Create and initialize (including reading the greeting)
           a client transport for the projector associated with this
           connector.

        If initialization fails after the connection was opened, the
        connection is closed before the exception is raised.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()
