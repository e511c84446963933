"""
Semantic validation of GCR messages.

The validator re-checks a fully assembled message, whether it came from the
parser or was built by hand, and reports every violation rather than
stopping at the first one.
"""

import logging
import re

from gcr_codec.constants import ALL_ACTION_CODES, FLIGHT_TYPES, FOOTNOTE_TYPES, IDENTIFIER_TYPES, MONTHS
from gcr_codec.models.message import GcrFlightLine, GcrFootnote, GcrMessage
from gcr_codec.models.validation import ValidationResult

logger = logging.getLogger(__name__)


class GcrValidator:
    """
    Field-level validator for GcrMessage.

    Errors are tagged with the dotted/indexed path of the offending field,
    e.g. ``airportSections[0].flights[1].time``, so that a form can map them
    back onto its inputs.
    """

    ICAO_PATTERN = re.compile(r'^[A-Z]{4}$')
    DATE_PATTERN = re.compile(r'^[0-9]{2}[A-Z]{3}$')
    AIRCRAFT_TYPE_PATTERN = re.compile(r'^[A-Z0-9]{3,4}$')
    TIME_PATTERN = re.compile(r'^[0-9]{4}$')

    MIN_SEATS = 0
    MAX_SEATS = 999

    @classmethod
    def validate(cls, message: GcrMessage) -> ValidationResult:
        """
        Validate a message.

        Args:
            message: Message to check

        Returns:
            ValidationResult listing every violated field, in message order
        """
        result = ValidationResult.success()
        header = message.header

        if not cls._is_icao(header.airport):
            result.add_error('header.airport', 'Airport must be a 4-letter ICAO code')

        if header.identifier_type not in IDENTIFIER_TYPES:
            result.add_error('header.identifierType', 'Identifier type must be FLT or REG')

        sections = message.airport_sections or []
        if not sections:
            result.add_error('airportSections', 'At least one airport section is required')
        elif cls._is_icao(header.airport) and header.airport != sections[0].airport:
            result.add_warning(
                f"Header airport {header.airport} differs from first section airport {sections[0].airport}"
            )

        for i, section in enumerate(sections):
            if not cls._is_icao(section.airport):
                result.add_error(f'airportSections[{i}].airport', 'Airport must be a 4-letter ICAO code')

            flights = section.flights or []
            if not flights:
                result.add_warning(f"Airport section {section.airport} has no flights")

            for j, flight in enumerate(flights):
                cls._validate_flight(flight, f'airportSections[{i}].flights[{j}]', result)

        for k, footnote in enumerate(message.footnotes or []):
            cls._validate_footnote(footnote, f'footnotes[{k}]', result)

        if not result.is_valid:
            logger.debug(f"Validation found {len(result.errors)} error(s)")
        return result

    @classmethod
    def _validate_flight(cls, flight: GcrFlightLine, prefix: str, result: ValidationResult) -> None:
        if flight.action_code not in ALL_ACTION_CODES:
            result.add_error(f'{prefix}.actionCode', f'Invalid action code: {flight.action_code}')

        if not flight.identifier:
            result.add_error(f'{prefix}.identifier', 'Identifier is required')

        if not cls._matches(cls.DATE_PATTERN, flight.date):
            result.add_error(f'{prefix}.date', 'Date must be in DDMMM format (e.g., 08JUN)')
        elif flight.date[2:] not in MONTHS:
            result.add_error(f'{prefix}.date', f'Invalid month: {flight.date[2:]}')

        if not isinstance(flight.seat_count, int) or not cls.MIN_SEATS <= flight.seat_count <= cls.MAX_SEATS:
            result.add_error(f'{prefix}.seatCount', 'Seat count must be 0-999')

        if not cls._matches(cls.AIRCRAFT_TYPE_PATTERN, flight.aircraft_type):
            result.add_error(f'{prefix}.aircraftType', 'Aircraft type must be 3-4 alphanumeric characters')

        if not cls._is_icao(flight.other_airport):
            result.add_error(f'{prefix}.otherAirport', 'Airport must be a 4-letter ICAO code')

        if not cls._matches(cls.TIME_PATTERN, flight.time):
            result.add_error(f'{prefix}.time', 'Time must be in HHMM format')

        if flight.flight_type not in FLIGHT_TYPES:
            result.add_error(f'{prefix}.flightType', f'Invalid flight type: {flight.flight_type}')

    @staticmethod
    def _validate_footnote(footnote: GcrFootnote, prefix: str, result: ValidationResult) -> None:
        if footnote.type not in FOOTNOTE_TYPES:
            result.add_error(f'{prefix}.type', f'Invalid footnote type: {footnote.type}')

        # Block form text: a line reading as a footnote marker would start a new footnote
        if isinstance(footnote.text, str) and '\n' in footnote.text:
            for line in footnote.text.splitlines():
                line = line.strip()
                if line in FOOTNOTE_TYPES or any(line.startswith(f"{kind} ") for kind in FOOTNOTE_TYPES):
                    result.add_error(f'{prefix}.text', f'Footnote line must not start with SI or GI: {line}')
                    break

    @classmethod
    def _is_icao(cls, value) -> bool:
        return cls._matches(cls.ICAO_PATTERN, value)

    @staticmethod
    def _matches(pattern: re.Pattern, value) -> bool:
        return isinstance(value, str) and pattern.fullmatch(value) is not None
