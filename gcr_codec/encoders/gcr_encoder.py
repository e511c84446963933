"""Encoder producing canonical GCR text from a GcrMessage."""

import logging
from typing import List

from gcr_codec.constants import GCR_MARKER
from gcr_codec.models.message import GcrFlightLine, GcrFootnote, GcrMessage

logger = logging.getLogger(__name__)


class GcrEncoder:
    """
    Structural inverse of GcrParser.

    The encoder does not validate its input; run the validator first on
    manually assembled messages.

    Output is canonical: seat counts are zero-padded to 3 digits and slot
    identifiers are always written as `` / ID.<slot>``, whatever form the
    decoded text used.
    """

    LINE_SEPARATOR = '\n'

    @classmethod
    def encode(cls, message: GcrMessage) -> str:
        """
        Encode a message as GCR text.

        Args:
            message: Message to encode

        Returns:
            GCR text, lines separated by LF, no trailing newline
        """
        lines = [GCR_MARKER, f"/{message.header.identifier_type}"]

        for section in message.airport_sections:
            lines.append(section.airport)
            for flight in section.flights:
                lines.append(cls.encode_flight_line(flight))

        for footnote in message.footnotes:
            lines.extend(cls.encode_footnote(footnote))

        logger.debug(f"Encoded message into {len(lines)} lines")
        return cls.LINE_SEPARATOR.join(lines)

    @staticmethod
    def encode_flight_line(flight: GcrFlightLine) -> str:
        """Encode one flight line, arrival or departure layout."""
        seats_aircraft = f"{flight.seat_count:03d}{flight.aircraft_type}"

        if flight.is_arrival:
            prefix = flight.action_code
            routing_time = f"{flight.other_airport}{flight.time}"
        else:
            prefix = f"{flight.action_code} "
            routing_time = f"{flight.time}{flight.other_airport}"

        line = f"{prefix}{flight.identifier} {flight.date} {seats_aircraft} {routing_time} {flight.flight_type}"

        if flight.slot_id:
            line += f" / ID.{flight.slot_id}"

        return line

    @staticmethod
    def encode_footnote(footnote: GcrFootnote) -> List[str]:
        """
        Encode a footnote.

        Multi-line text is written in block form, a bare ``SI``/``GI`` line
        followed by the text lines, which the parser reads back as one
        footnote. Blank text lines are not representable and are omitted.
        """
        if not footnote.is_multiline:
            return [f"{footnote.type} {footnote.text}".rstrip()]

        text_lines = [line.strip() for line in footnote.text.splitlines()]
        return [footnote.type] + [line for line in text_lines if line]
