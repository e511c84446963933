import pytest

from gcr_codec.codec import GcrCodec
from gcr_codec.models.message import (
    GcrAirportSection,
    GcrFlightLine,
    GcrFootnote,
    GcrHeader,
    GcrMessage,
    MessageType,
)

# Departure with registration
EXAMPLE_1N = """GCR
/REG
EDDF
N HBIEV 08JUN 010G159 0750LOWW D
GI BRGDS"""

# Arrival with flight number
EXAMPLE_2N = """GCR
/FLT
EDDF
NABC123 08JUN 010G159 LSZH0900 D
GI BRGDS"""

# Arrival and departure with different flight numbers
EXAMPLE_3N = """GCR
/FLT
EDDF
NABC123 08JUN 010G159 LSZH0900 D
N ABC456 09JUN 010G159 1400LSZH D
GI BRGDS"""

# Domestic flight between two coordinated airports
EXAMPLE_4N = """GCR
/FLT
EDDF
N ABC123 08JUN 010G159 0900EDDL D
EDDL
NABC123 08JUN 010G159 EDDF1000 D
GI BRGDS"""

# Coordinator confirmation with slot IDs
EXAMPLE_1NA = """GCR
/FLT
EDDF
K ABC123 08JUN 010G159 0900EDDL D / ID.EDDF3010070001
EDDL
KABC123 08JUN 010G159 EDDF1000 D / ID.EDDL3010070001
GI BRGDS"""

# Refusal with alternative confirmation
EXAMPLE_2NA = """GCR
/FLT
EDDF
UABC123 08JUN 010G159 LSZH0900 D
KABC123 08JUN 010G159 LSZH1000 D / ID.EDDF3010070001
GI BRGDS"""

EXAMPLE_WITH_SI = """GCR
/FLT
EDDF
NABC123 08JUN 010G159 LSZH0900 D
SI IF NOT AVBL PLS CFM NEXT LATER POSS
GI BRGDS"""

# Delete request
EXAMPLE_1D = """GCR
/FLT
EDDF
DABC123 08JUN 010G159 LSZH0900 D / ID.EDDF3010070001
GI BRGDS"""

# Change request: C line with the existing slot, R line with the new schedule
EXAMPLE_1C = """GCR
/FLT
EDDF
CABC123 08JUN 010G159 LSZH0900 D / ID.3010070001
RABC123 08JUN 010G159 LSZH1000 D
GI BRGDS"""

# Reply with the "D/ ID.X/" slot form and a multi-line SI block
EXAMPLE_REPLY_MULTILINE_SI = """GCR
/REG
EDDH
KDFABC 16DEC 006TBM9 EPWR1615 D/ ID.EDDH1512250402/
H DFABC 16DEC 006TBM9 0945EPWR D/ ID.EDDH1512250397/
SI
- PLEASE NOTE AIRPORTSLOT-ID MUST BE ENTERED
  IN YOUR FLIGHTPLAN
GI BRGDS"""


@pytest.fixture
def codec() -> GcrCodec:
    return GcrCodec()


@pytest.fixture
def samples() -> dict:
    """Sample GCR messages by name."""
    return {
        '1N': EXAMPLE_1N,
        '2N': EXAMPLE_2N,
        '3N': EXAMPLE_3N,
        '4N': EXAMPLE_4N,
        '1NA': EXAMPLE_1NA,
        '2NA': EXAMPLE_2NA,
        'WITH_SI': EXAMPLE_WITH_SI,
        '1D': EXAMPLE_1D,
        '1C': EXAMPLE_1C,
        'REPLY_MULTILINE_SI': EXAMPLE_REPLY_MULTILINE_SI,
    }


@pytest.fixture
def manual_message() -> GcrMessage:
    """A request assembled by hand, as a form would build it."""
    return GcrMessage(
        header=GcrHeader(identifier_type='REG', airport='EDDF'),
        airport_sections=[
            GcrAirportSection(
                airport='EDDF',
                flights=[
                    GcrFlightLine(
                        action_code='N',
                        identifier='HBIEV',
                        date='08JUN',
                        seat_count=10,
                        aircraft_type='G159',
                        is_arrival=True,
                        other_airport='LSZH',
                        time='0900',
                        flight_type='D',
                    ),
                    GcrFlightLine(
                        action_code='N',
                        identifier='HBIEV',
                        date='10JUN',
                        seat_count=10,
                        aircraft_type='G159',
                        is_arrival=False,
                        other_airport='LSZH',
                        time='1530',
                        flight_type='D',
                    ),
                ],
            ),
        ],
        footnotes=[GcrFootnote(type='GI', text='BRGDS')],
        message_type=MessageType.REQUEST,
    )
