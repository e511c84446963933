"""Tests for the gcr command line tool."""

import json

import pytest

from gcr_codec.cli import main


@pytest.fixture
def gcr_file(tmp_path, samples):
    path = tmp_path / 'reply.txt'
    path.write_text(samples['REPLY_MULTILINE_SI'])
    return path


class TestDecodeCommand:

    def test_decode_to_json(self, gcr_file, capsys):
        assert main(['decode', str(gcr_file)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data['message_type'] == 'reply'
        assert data['airport_sections'][0]['flights'][1]['slot_id'] == 'EDDH1512250397'

    def test_decode_table(self, gcr_file, capsys):
        assert main(['decode', '--table', str(gcr_file)]) == 0

        out = capsys.readouterr().out
        assert 'EDDH1512250402' in out
        assert 'Slot Confirmed' in out

    def test_decode_error(self, tmp_path, capsys):
        path = tmp_path / 'bad.txt'
        path.write_text('GCR\n/FLT\nEDDF\nNABC123 08JUX 010G159 LSZH0900 D')

        assert main(['decode', str(path)]) == 1
        assert 'Line 4: Invalid month: JUX' in capsys.readouterr().err

    def test_output_file(self, gcr_file, tmp_path):
        out_path = tmp_path / 'decoded.json'

        assert main(['-o', str(out_path), 'decode', str(gcr_file)]) == 0
        assert json.loads(out_path.read_text())['header']['airport'] == 'EDDH'


class TestEncodeCommand:

    def test_encode_from_json(self, manual_message, tmp_path, capsys):
        path = tmp_path / 'message.json'
        manual_message.save(path)

        assert main(['encode', str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            'GCR',
            '/REG',
            'EDDF',
            'NHBIEV 08JUN 010G159 LSZH0900 D',
            'N HBIEV 10JUN 010G159 1530LSZH D',
            'GI BRGDS',
        ]

    def test_encode_rejects_invalid_message(self, manual_message, tmp_path, capsys):
        manual_message.airport_sections[0].flights[0].time = '9AM'
        path = tmp_path / 'message.json'
        manual_message.save(path)

        assert main(['encode', str(path)]) == 1
        assert 'airportSections[0].flights[0].time' in capsys.readouterr().err

    def test_encode_without_validation(self, manual_message, tmp_path, capsys):
        manual_message.airport_sections[0].flights[0].time = '9AM'
        path = tmp_path / 'message.json'
        manual_message.save(path)

        assert main(['encode', '--no-validate', str(path)]) == 0
        assert 'NHBIEV 08JUN 010G159 LSZH9AM D' in capsys.readouterr().out

    def test_encode_bad_json(self, tmp_path, capsys):
        path = tmp_path / 'message.json'
        path.write_text('{"airport_sections": []}')

        assert main(['encode', str(path)]) == 1
        assert 'Invalid message JSON' in capsys.readouterr().err


class TestValidateCommand:

    def test_valid_message(self, gcr_file, capsys):
        assert main(['validate', str(gcr_file)]) == 0
        assert capsys.readouterr().out.startswith('Valid')

    def test_invalid_json_message(self, manual_message, tmp_path, capsys):
        manual_message.header.airport = 'XX'
        path = tmp_path / 'message.json'
        manual_message.save(path)

        assert main(['validate', '--json', str(path)]) == 1
        out = capsys.readouterr().out
        assert 'Invalid (1 errors)' in out
        assert 'header.airport' in out
