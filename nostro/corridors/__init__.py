"""
Corridors module - Factory functions for the bundled payment corridors.

Each module builds one Corridor with its bank chain and both settlement
sequences:
- sgd_gbp: Singapore → UK, converted mid-chain in Singapore
- usd_ngn: USA → Nigeria, routed via London, converted on the last hop
- inr_usd: India → USA, intra-group conversion at Deutsche Bank
- aed_php: UAE → Philippines, intra-group remittance at Standard Chartered
- jpy_mxn: Japan → Mexico, two conversions through USD

All corridor factories are re-exported here for convenience.
"""

from typing import Callable, List, Tuple

from ..core import Corridor

from .sgd_gbp import create_sgd_gbp_corridor
from .usd_ngn import create_usd_ngn_corridor
from .inr_usd import create_inr_usd_corridor
from .aed_php import create_aed_php_corridor
from .jpy_mxn import create_jpy_mxn_corridor

from .common import UETR


# Display order of the bundled corridors.
ALL_CORRIDOR_FACTORIES: Tuple[Callable[[], Corridor], ...] = (
    create_sgd_gbp_corridor,
    create_usd_ngn_corridor,
    create_inr_usd_corridor,
    create_aed_php_corridor,
    create_jpy_mxn_corridor,
)


def load_corridors() -> List[Corridor]:
    """Build every bundled corridor, in display order. No validation is done here."""
    return [factory() for factory in ALL_CORRIDOR_FACTORIES]


__all__ = [
    'create_sgd_gbp_corridor',
    'create_usd_ngn_corridor',
    'create_inr_usd_corridor',
    'create_aed_php_corridor',
    'create_jpy_mxn_corridor',
    'ALL_CORRIDOR_FACTORIES',
    'load_corridors',
    'UETR',
]
