"""
Desktop session wiring.

Builds the client, store, resolver and selector from Config and holds
the current topology snapshot for one program run.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .backdrop import BackdropStore
from .config import Config
from .rotation import RotationOrchestrator
from .selector import ImageSelector
from .topology import TopologyResolver, TopologySnapshot
from .xfconf import XfconfClient, XfconfTransport

logger = logging.getLogger(__name__)


@dataclass
class DesktopSession:
    """Collaborators for one run plus the current topology snapshot."""
    config: Config
    client: XfconfClient
    store: BackdropStore
    resolver: TopologyResolver
    selector: ImageSelector
    snapshot: TopologySnapshot

    @classmethod
    def from_config(
        cls,
        config: Config,
        seed: Optional[int] = None,
        transport: Optional[XfconfTransport] = None,
        selector: Optional[ImageSelector] = None,
    ) -> 'DesktopSession':
        """
        Create a session and resolve the topology.

        Args:
            config: Loaded configuration
            seed: Random seed overriding config.rotation.seed
            transport: Transport override (tests)
            selector: Selector override (tests)

        Raises:
            NoTopologyError: If no monitor is found
            TransportError: If the configuration service is unreachable
        """
        client = XfconfClient(config.xfconf, transport=transport)
        resolver = TopologyResolver(client)
        if selector is None:
            selector = ImageSelector.seeded(seed if seed is not None else config.rotation.seed)

        return cls(
            config=config,
            client=client,
            store=BackdropStore(client),
            resolver=resolver,
            selector=selector,
            snapshot=resolver.resolve(),
        )

    def refresh(self) -> TopologySnapshot:
        """Replace the held snapshot with a freshly resolved one."""
        self.snapshot = self.resolver.refresh()
        return self.snapshot

    def orchestrator(self) -> RotationOrchestrator:
        """New orchestrator for one rotation run."""
        return RotationOrchestrator(self.store, self.selector)
