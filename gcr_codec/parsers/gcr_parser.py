"""
Parser for GCR slot coordination messages.

Handles requests from aircraft operators as well as coordinator replies,
including slot identifiers and multi-line SI/GI footnotes.
"""

import logging
import re
from typing import List, Optional, Union

from gcr_codec.constants import (
    GCR_MARKER,
    ALL_ACTION_CODES,
    OWNER_ACTION_CODES,
    COORDINATOR_ACTION_CODES,
    FLIGHT_TYPES,
    FOOTNOTE_TYPES,
    MONTHS,
)
from gcr_codec.models.message import (
    GcrAirportSection,
    GcrFlightLine,
    GcrFootnote,
    GcrHeader,
    GcrMessage,
    GcrParseError,
    MessageType,
)

logger = logging.getLogger(__name__)


class GcrParser:
    """
    Parser for GCR messages.

    Decoding is a single forward pass over the non-blank lines of the
    message: the two header lines, then airport codes, flight lines and
    footnotes. The first malformed flight line aborts the decode; no partial
    message is returned.

    Example:
        result = GcrParser.parse('''
            GCR
            /REG
            EDDF
            N HBIEV 08JUN 010G159 0750LOWW D
            GI BRGDS
        ''')
        if not is_parse_error(result):
            flight = result.airport_sections[0].flights[0]
    """

    IDENTIFIER_LINES = {'/FLT': 'FLT', '/REG': 'REG'}

    LINE_SPLIT_PATTERN = re.compile(r'\r?\n')

    AIRPORT_PATTERN = re.compile(r'^[A-Z]{4}$')

    # Slot ID suffix, all of " / ID.X", " / ID.X/" and "/ ID.X/"
    SLOT_ID_PATTERN = re.compile(r'\s*/\s*ID\.?([A-Z0-9]+)/?$')

    DATE_PATTERN = re.compile(r'^[0-9]{2}[A-Z]{3}$')

    # Seat count (3 digits) immediately followed by aircraft type, e.g. 010G159
    SEATS_AIRCRAFT_PATTERN = re.compile(r'^([0-9]{3})([A-Z0-9]{3,4})$')

    # Arrival: origin then time (LSZH0900), departure: time then destination (0750LOWW)
    ARRIVAL_ROUTING_PATTERN = re.compile(r'^([A-Z]{4})([0-9]{4})$')
    DEPARTURE_ROUTING_PATTERN = re.compile(r'^([0-9]{4})([A-Z]{4})$')

    @classmethod
    def parse(cls, text: str) -> Union[GcrMessage, GcrParseError]:
        """
        Decode a GCR message.

        Args:
            text: Raw GCR text, CR/LF or LF line endings

        Returns:
            GcrMessage on success, GcrParseError otherwise
        """
        lines = cls._clean_lines(text)

        if len(lines) < 3:
            return cls._fail('Invalid GCR message: too few lines')

        if lines[0] != GCR_MARKER:
            return cls._fail('Invalid GCR message: must start with GCR', line=1, details=lines[0])

        identifier_type = cls.IDENTIFIER_LINES.get(lines[1])
        if identifier_type is None:
            return cls._fail('Invalid identifier type: must be /FLT or /REG', line=2, details=lines[1])

        header = GcrHeader(identifier_type=identifier_type)
        airport_sections: List[GcrAirportSection] = []
        footnotes: List[GcrFootnote] = []

        current_airport = ''
        current_flights: List[GcrFlightLine] = []
        index = 2

        while index < len(lines):
            line = lines[index]

            if cls._is_inline_footnote(line):
                footnotes.append(GcrFootnote(type=line[:2], text=line[3:].strip()))
                index += 1
                continue

            if line in FOOTNOTE_TYPES:
                index += 1
                block: List[str] = []
                while index < len(lines) and not cls._is_footnote_start(lines[index]):
                    block.append(lines[index])
                    index += 1
                logger.debug(f"Collected {len(block)} line {line} footnote block")
                footnotes.append(GcrFootnote(type=line, text='\n'.join(block)))
                continue

            if cls.AIRPORT_PATTERN.match(line):
                cls._flush_section(airport_sections, current_airport, current_flights)
                current_airport = line
                current_flights = []
                if not header.airport:
                    header.airport = line
                index += 1
                continue

            flight = cls._parse_flight_line(line, index + 1)
            if isinstance(flight, GcrParseError):
                logger.debug(f"Decode failed: {flight}")
                return flight
            current_flights.append(flight)
            index += 1

        cls._flush_section(airport_sections, current_airport, current_flights)

        if not airport_sections:
            return cls._fail('No valid flight lines found')

        message_type = cls._detect_message_type(airport_sections)
        logger.debug(
            f"Decoded {message_type.value} message for {header.airport} "
            f"with {len(airport_sections)} section(s) and {len(footnotes)} footnote(s)"
        )

        return GcrMessage(
            header=header,
            airport_sections=airport_sections,
            footnotes=footnotes,
            message_type=message_type,
        )

    @classmethod
    def _clean_lines(cls, text: str) -> List[str]:
        """Split into trimmed, non-blank lines."""
        lines = (line.strip() for line in cls.LINE_SPLIT_PATTERN.split(text.strip()))
        return [line for line in lines if line]

    @staticmethod
    def _is_inline_footnote(line: str) -> bool:
        return any(line.startswith(f"{kind} ") for kind in FOOTNOTE_TYPES)

    @classmethod
    def _is_footnote_start(cls, line: str) -> bool:
        return line in FOOTNOTE_TYPES or cls._is_inline_footnote(line)

    @staticmethod
    def _flush_section(
        sections: List[GcrAirportSection],
        airport: str,
        flights: List[GcrFlightLine]
    ) -> None:
        """Close the active section; sections without flights are dropped."""
        if not flights:
            return
        if not airport:
            # Flight lines before the first airport code have no section to join
            logger.warning(f"Dropping {len(flights)} flight line(s) found before any airport code")
            return
        sections.append(GcrAirportSection(airport=airport, flights=flights))

    @classmethod
    def _parse_flight_line(cls, line: str, line_number: int) -> Union[GcrFlightLine, GcrParseError]:
        """
        Parse a single flight line.

        Arrivals have the identifier glued to the action code
        (``NABC123 08JUN 010G159 LSZH0900 D``), departures separate them with
        a space (``N ABC123 08JUN 010G159 0900LSZH D``).

        Args:
            line: Trimmed, non-blank source line
            line_number: 1-based line number for error reporting
        """
        action_code = line[0]
        if action_code not in ALL_ACTION_CODES:
            return cls._fail(f"Invalid action code: {action_code}", line=line_number, details=line)

        is_arrival = line[1:2] != ' '

        slot_id: Optional[str] = None
        main_part = line
        slot_match = cls.SLOT_ID_PATTERN.search(line)
        if slot_match:
            slot_id = slot_match.group(1)
            main_part = line[:slot_match.start()].strip()

        rest = main_part[1:] if is_arrival else main_part[2:]
        parts = rest.split()

        if len(parts) < 4:
            return cls._fail('Invalid flight line format: too few parts', line=line_number, details=line)

        identifier = parts[0]

        date = parts[1]
        if not cls.DATE_PATTERN.match(date):
            return cls._fail(f"Invalid date format: {date}", line=line_number, details=line)
        month = date[2:]
        if month not in MONTHS:
            return cls._fail(f"Invalid month: {month}", line=line_number, details=line)

        seats_aircraft = parts[2]
        seat_match = cls.SEATS_AIRCRAFT_PATTERN.match(seats_aircraft)
        if not seat_match:
            return cls._fail(f"Invalid seat/aircraft format: {seats_aircraft}", line=line_number, details=line)
        seat_count = int(seat_match.group(1))
        aircraft_type = seat_match.group(2)

        routing_time = parts[3]
        if is_arrival:
            routing_match = cls.ARRIVAL_ROUTING_PATTERN.match(routing_time)
            if not routing_match:
                return cls._fail(
                    f"Invalid arrival routing/time format: {routing_time}",
                    line=line_number, details=line
                )
            other_airport, time = routing_match.group(1), routing_match.group(2)
        else:
            routing_match = cls.DEPARTURE_ROUTING_PATTERN.match(routing_time)
            if not routing_match:
                return cls._fail(
                    f"Invalid departure routing/time format: {routing_time}",
                    line=line_number, details=line
                )
            time, other_airport = routing_match.group(1), routing_match.group(2)

        # A slash left over from "D/ ID.X/" style suffixes
        flight_type = parts[4] if len(parts) > 4 else ''
        if flight_type.endswith('/'):
            flight_type = flight_type[:-1]
        if flight_type not in FLIGHT_TYPES:
            return cls._fail(f"Invalid flight type: {flight_type}", line=line_number, details=line)

        return GcrFlightLine(
            action_code=action_code,
            identifier=identifier,
            date=date,
            seat_count=seat_count,
            aircraft_type=aircraft_type,
            is_arrival=is_arrival,
            other_airport=other_airport,
            time=time,
            flight_type=flight_type,
            slot_id=slot_id,
        )

    @staticmethod
    def _detect_message_type(sections: List[GcrAirportSection]) -> MessageType:
        """Request, reply or mixed, from the action codes present."""
        has_owner_code = False
        has_coordinator_code = False

        for section in sections:
            for flight in section.flights:
                if flight.action_code in OWNER_ACTION_CODES:
                    has_owner_code = True
                if flight.action_code in COORDINATOR_ACTION_CODES:
                    has_coordinator_code = True

        if has_owner_code and has_coordinator_code:
            return MessageType.MIXED
        if has_coordinator_code:
            return MessageType.REPLY
        return MessageType.REQUEST

    @staticmethod
    def _fail(message: str, line: Optional[int] = None, details: Optional[str] = None) -> GcrParseError:
        return GcrParseError(message=message, line=line, details=details)
