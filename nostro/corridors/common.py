"""
common.py - Shared builders for corridor factory modules

Corridor modules describe their banks and steps with these small builders so
that the reference data reads as a table rather than as constructor calls.
"""

from __future__ import annotations
from typing import Optional

from ..core import Bank, BankRole, Direction, Number, Step


# gpi Unique End-to-end Transaction Reference quoted by every template.
UETR = "e8b7a4c2-9d3f-4e1a-b5c6-8f2d7a3e9b1c"

# ISO 20022 message identifiers
PACS_008 = "pacs.008.001.13"
PACS_009 = "pacs.009.001.12"
PACS_002 = "pacs.002.001.15"
CAMT_054 = "camt.054.001.13"

CREDIT_TRANSFER = "FI to FI Customer Credit Transfer"
COVER_TRANSFER = "Financial Institution Credit Transfer (Cover)"
STATUS_REPORT = "Payment Status Report"
END_TO_END_STATUS = "Payment Status Report (End-to-End)"
NOTIFICATION = "Bank to Customer Debit/Credit Notification"

_MESSAGE_NAMES = {
    PACS_008: CREDIT_TRANSFER,
    PACS_009: COVER_TRANSFER,
    PACS_002: STATUS_REPORT,
    CAMT_054: NOTIFICATION,
}


def bank(name: str, bic: str, country: str, country_code: str, role: str) -> Bank:
    return Bank(name=name, bic=bic, country=country, country_code=country_code, role=BankRole(role))


def forward(
    id: int,
    from_index: int,
    to_index: int,
    message_type: str,
    description: str,
    duration: str,
    template: str,
    detail: str,
    fee: Optional[Number] = None,
    fx_rate: Optional[Number] = None,
    fx_from: Optional[str] = None,
    fx_to: Optional[str] = None,
    nostro_action: Optional[str] = None,
    message_name: Optional[str] = None,
) -> Step:
    """Build a forward (instruction or settlement) step."""
    return Step(
        id=id,
        from_index=from_index,
        to_index=to_index,
        direction=Direction.FORWARD,
        message_type=message_type,
        message_name=message_name or _MESSAGE_NAMES[message_type],
        description=description,
        duration=duration,
        message_template=template.strip(),
        detail=detail,
        fee=fee,
        fx_rate=fx_rate,
        fx_from=fx_from,
        fx_to=fx_to,
        nostro_action=nostro_action,
    )


def backward(
    id: int,
    from_index: int,
    to_index: int,
    message_type: str,
    description: str,
    duration: str,
    template: str,
    detail: str,
    message_name: Optional[str] = None,
) -> Step:
    """Build a backward (status or notification) step. Backward steps never carry money."""
    return Step(
        id=id,
        from_index=from_index,
        to_index=to_index,
        direction=Direction.BACKWARD,
        message_type=message_type,
        message_name=message_name or _MESSAGE_NAMES[message_type],
        description=description,
        duration=duration,
        message_template=template.strip(),
        detail=detail,
    )
