"""Tabular export of decoded flight lines."""

from typing import List, Dict, Any

import pandas as pd

from gcr_codec.models.message import GcrMessage

FLIGHT_TABLE_COLUMNS = [
    'airport',
    'action_code',
    'status',
    'identifier',
    'date',
    'time',
    'direction',
    'other_airport',
    'aircraft_type',
    'seat_count',
    'flight_type',
    'flight_type_description',
    'slot_id',
]


def flight_rows(message: GcrMessage) -> List[Dict[str, Any]]:
    """
    One dictionary per flight line, sorted by date and time.

    ``status`` is the reply status for coordinator codes and the action
    description for operator codes.
    """
    rows = []
    for section in message.airport_sections:
        for flight in section.flights:
            status = flight.reply_status.get('description', flight.action_description)
            rows.append({
                'airport': section.airport,
                'action_code': flight.action_code,
                'status': status,
                'identifier': flight.identifier,
                'date': flight.date,
                'time': flight.formatted_time,
                'direction': flight.direction,
                'other_airport': flight.other_airport,
                'aircraft_type': flight.aircraft_type,
                'seat_count': flight.seat_count,
                'flight_type': flight.flight_type,
                'flight_type_description': flight.flight_type_description,
                'slot_id': flight.slot_id,
                '_sort_key': flight.sort_key(),
            })
    rows.sort(key=lambda row: row['_sort_key'])
    for row in rows:
        del row['_sort_key']
    return rows


def flights_dataframe(message: GcrMessage) -> pd.DataFrame:
    """
    Build a DataFrame of the message's flights, earliest first.

    Args:
        message: Decoded or assembled message

    Returns:
        DataFrame with FLIGHT_TABLE_COLUMNS, empty if the message has no flights
    """
    return pd.DataFrame(flight_rows(message), columns=FLIGHT_TABLE_COLUMNS)
