"""
Fixed lookup tables for GCR messages.

Action codes are split between the aircraft owner/operator side (requests)
and the slot coordinator side (replies). The split drives message type
detection in the parser.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Tuple

GCR_MARKER = 'GCR'

OWNER_ACTION_CODES: Tuple[str, ...] = ('N', 'D', 'C', 'R')
COORDINATOR_ACTION_CODES: Tuple[str, ...] = ('K', 'X', 'H', 'U', 'W')
ALL_ACTION_CODES: Tuple[str, ...] = OWNER_ACTION_CODES + COORDINATOR_ACTION_CODES

IDENTIFIER_TYPES: FrozenSet[str] = frozenset({'FLT', 'REG'})
FOOTNOTE_TYPES: Tuple[str, ...] = ('SI', 'GI')
FLIGHT_TYPES: Tuple[str, ...] = ('D', 'I', 'N')

MONTHS: Tuple[str, ...] = (
    'JAN', 'FEB', 'MAR', 'APR', 'MAY', 'JUN',
    'JUL', 'AUG', 'SEP', 'OCT', 'NOV', 'DEC',
)

ACTION_CODE_DESCRIPTIONS = MappingProxyType({
    'N': 'New schedule',
    'D': 'Delete schedule',
    'C': 'Schedule to be changed',
    'R': 'Revised schedule',
    'K': 'Confirmation',
    'X': 'Cancelled',
    'H': 'Holding',
    'U': 'Refusal',
    'W': 'Wrong',
})

FLIGHT_TYPE_DESCRIPTIONS = MappingProxyType({
    'D': 'General Aviation',
    'I': 'State/Diplomatic',
    'N': 'Business Aviation/Air taxi',
})

FOOTNOTE_DESCRIPTIONS = MappingProxyType({
    'SI': 'Supplementary Information',
    'GI': 'General Information',
})

# Coordinator code -> (description, status class)
REPLY_STATUS_INFO = MappingProxyType({
    'K': ('Slot Confirmed', 'confirmed'),
    'X': ('Slot Cancelled', 'cancelled'),
    'H': ('Request Held', 'held'),
    'U': ('Request Refused', 'refused'),
    'W': ('Wrong/Invalid Request', 'error'),
})


def month_index(month: str) -> int:
    """Return the 0-based index of a 3-letter month, or -1 if unknown."""
    try:
        return MONTHS.index(month.upper())
    except ValueError:
        return -1


def describe_action_code(code: str) -> str:
    """Human readable description of an action code, falling back to the code."""
    return ACTION_CODE_DESCRIPTIONS.get(code, code)


def reply_status(code: str) -> Dict[str, str]:
    """
    Status information for a coordinator action code.

    Returns an empty dict for owner codes, which carry no reply status.
    """
    info = REPLY_STATUS_INFO.get(code)
    if info is None:
        return {}
    description, status_class = info
    return {'description': description, 'status_class': status_class}
