"""GCR message data model."""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, List, Dict, Any, Tuple, Union

from gcr_codec.constants import (
    OWNER_ACTION_CODES,
    COORDINATOR_ACTION_CODES,
    FLIGHT_TYPE_DESCRIPTIONS,
    FOOTNOTE_DESCRIPTIONS,
    describe_action_code,
    reply_status,
    month_index,
)


class MessageType(Enum):
    """
    Nature of a GCR message, derived from the action codes it carries.

    REQUEST messages come from the aircraft operator (N, D, C, R codes),
    REPLY messages from the slot coordinator (K, X, H, U, W codes). A
    coordinator reply offering an alternative slot alongside the original
    request lines is MIXED.
    """
    REQUEST = "request"
    REPLY = "reply"
    MIXED = "mixed"


@dataclass
class GcrHeader:
    """
    Message header.

    Attributes:
        identifier_type: FLT (flight number) or REG (aircraft registration)
        airport: Coordinated airport, the first airport section of the message
    """

    identifier_type: str
    airport: str = ""

    def to_dict(self) -> dict:
        return {
            'identifier_type': self.identifier_type,
            'airport': self.airport,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GcrHeader':
        return cls(
            identifier_type=data['identifier_type'],
            airport=data.get('airport', ''),
        )


@dataclass
class GcrFlightLine:
    """
    A single flight line of a GCR message.

    Arrival lines carry the origin airport, departure lines the destination,
    both in ``other_airport``.

    Example:
        flight = GcrFlightLine(
            action_code='N',
            identifier='HBIEV',
            date='08JUN',
            seat_count=10,
            aircraft_type='G159',
            is_arrival=False,
            other_airport='LOWW',
            time='0750',
            flight_type='D',
        )
    """

    action_code: str
    identifier: str
    date: str                           # DDMMM, e.g. "08JUN"
    seat_count: int
    aircraft_type: str
    is_arrival: bool
    other_airport: str
    time: str                           # HHMM, e.g. "0750"
    flight_type: str
    slot_id: Optional[str] = None       # Coordinator slot identifier, without "ID."

    @property
    def direction(self) -> str:
        return "Arrival" if self.is_arrival else "Departure"

    @property
    def formatted_time(self) -> str:
        """Time as HH:MM."""
        if len(self.time) != 4:
            return self.time
        return f"{self.time[:2]}:{self.time[2:]}"

    @property
    def action_description(self) -> str:
        return describe_action_code(self.action_code)

    @property
    def reply_status(self) -> Dict[str, str]:
        return reply_status(self.action_code)

    @property
    def flight_type_description(self) -> str:
        return FLIGHT_TYPE_DESCRIPTIONS.get(self.flight_type, self.flight_type)

    @property
    def is_owner_action(self) -> bool:
        return self.action_code in OWNER_ACTION_CODES

    @property
    def is_coordinator_action(self) -> bool:
        return self.action_code in COORDINATOR_ACTION_CODES

    def sort_key(self) -> Tuple[int, int, int]:
        """
        Chronological sort key: month, day, time.

        GCR dates carry no year, so flights spanning a year end sort by
        calendar month only.
        """
        day = int(self.date[:2]) if self.date[:2].isdigit() else 0
        time = int(self.time) if self.time.isdigit() else 0
        return month_index(self.date[2:]), day, time

    def to_dict(self) -> dict:
        return {
            'action_code': self.action_code,
            'identifier': self.identifier,
            'date': self.date,
            'seat_count': self.seat_count,
            'aircraft_type': self.aircraft_type,
            'is_arrival': self.is_arrival,
            'other_airport': self.other_airport,
            'time': self.time,
            'flight_type': self.flight_type,
            'slot_id': self.slot_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GcrFlightLine':
        return cls(
            action_code=data['action_code'],
            identifier=data['identifier'],
            date=data['date'],
            seat_count=int(data['seat_count']),
            aircraft_type=data['aircraft_type'],
            is_arrival=bool(data['is_arrival']),
            other_airport=data['other_airport'],
            time=data['time'],
            flight_type=data['flight_type'],
            slot_id=data.get('slot_id'),
        )

    def __str__(self) -> str:
        slot = f" [{self.slot_id}]" if self.slot_id else ""
        return (
            f"{self.action_code} {self.identifier} {self.date} {self.formatted_time} "
            f"{'from' if self.is_arrival else 'to'} {self.other_airport}{slot}"
        )


@dataclass
class GcrAirportSection:
    """Flight lines grouped under one coordinated airport."""

    airport: str
    flights: List[GcrFlightLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'airport': self.airport,
            'flights': [f.to_dict() for f in self.flights],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GcrAirportSection':
        return cls(
            airport=data['airport'],
            flights=[GcrFlightLine.from_dict(f) for f in data.get('flights', [])],
        )


@dataclass
class GcrFootnote:
    """SI (supplementary) or GI (general) free-text remark."""

    type: str
    text: str = ""

    @property
    def is_multiline(self) -> bool:
        return '\n' in self.text

    @property
    def description(self) -> str:
        """Long name of the footnote type, e.g. Supplementary Information."""
        return FOOTNOTE_DESCRIPTIONS.get(self.type, self.type)

    def to_dict(self) -> dict:
        return {'type': self.type, 'text': self.text}

    @classmethod
    def from_dict(cls, data: dict) -> 'GcrFootnote':
        return cls(type=data['type'], text=data.get('text', ''))


@dataclass
class GcrMessage:
    """
    A complete GCR message.

    Produced by a successful decode, or assembled by a caller before
    encoding. Fields may be edited after decoding; call the validator again
    afterwards.

    Attributes:
        header: Identifier type and coordinated airport
        airport_sections: Ordered airport sections, each with at least one flight
        footnotes: Ordered SI/GI remarks
        message_type: Request, reply or mixed
    """

    header: GcrHeader
    airport_sections: List[GcrAirportSection] = field(default_factory=list)
    footnotes: List[GcrFootnote] = field(default_factory=list)
    message_type: MessageType = MessageType.REQUEST

    def all_flights(self) -> List[GcrFlightLine]:
        """All flight lines across sections, in message order."""
        return [flight for section in self.airport_sections for flight in section.flights]

    def sorted_flights(self) -> List[GcrFlightLine]:
        """All flight lines sorted by date and time, earliest first."""
        return sorted(self.all_flights(), key=lambda f: f.sort_key())

    def common_identifier(self) -> Optional[str]:
        """The identifier shared by every flight, or None if they differ."""
        flights = self.all_flights()
        if not flights:
            return None
        first = flights[0].identifier
        return first if all(f.identifier == first for f in flights) else None

    def common_aircraft(self) -> Optional[Tuple[str, int]]:
        """(aircraft_type, seat_count) shared by every flight, or None."""
        flights = self.all_flights()
        if not flights:
            return None
        first = (flights[0].aircraft_type, flights[0].seat_count)
        if all((f.aircraft_type, f.seat_count) == first for f in flights):
            return first
        return None

    def footnotes_of_type(self, footnote_type: str) -> List[GcrFootnote]:
        return [f for f in self.footnotes if f.type == footnote_type]

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON export.

        Returns:
            Dictionary representation suitable for JSON serialization.
        """
        return {
            'header': self.header.to_dict(),
            'airport_sections': [s.to_dict() for s in self.airport_sections],
            'footnotes': [f.to_dict() for f in self.footnotes],
            'message_type': self.message_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GcrMessage':
        """
        Create GcrMessage from dictionary.

        A missing message_type defaults to request; the encoder ignores it.
        """
        message_type = MessageType.REQUEST
        if data.get('message_type'):
            message_type = MessageType(data['message_type'])

        return cls(
            header=GcrHeader.from_dict(data['header']),
            airport_sections=[GcrAirportSection.from_dict(s) for s in data.get('airport_sections', [])],
            footnotes=[GcrFootnote.from_dict(f) for f in data.get('footnotes', [])],
            message_type=message_type,
        )

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> 'GcrMessage':
        return cls.from_dict(json.loads(json_str))

    def save(self, path: Union[str, Path]) -> None:
        """Save message to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'GcrMessage':
        """Load message from JSON file."""
        return cls.from_json(Path(path).read_text())

    def __repr__(self) -> str:
        return (
            f"GcrMessage(type={self.message_type.value!r}, airport={self.header.airport!r}, "
            f"sections={len(self.airport_sections)}, flights={len(self.all_flights())})"
        )


@dataclass
class GcrParseError:
    """
    Decode failure.

    Structural errors (bad header, too few lines, no sections) carry no or a
    coarse line number; flight line format errors carry the 1-based line of
    the offending line.
    """

    message: str
    line: Optional[int] = None
    details: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'error': True,
            'message': self.message,
            'line': self.line,
            'details': self.details,
        }

    def __str__(self) -> str:
        if self.line is not None:
            return f"Line {self.line}: {self.message}"
        return self.message


def is_parse_error(result: Any) -> bool:
    """True if a decode result is a GcrParseError rather than a GcrMessage."""
    return isinstance(result, GcrParseError)
