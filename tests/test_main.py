"""Tests for the command line entry point."""

import json

import pytest

from brutalist_buildings.main import build_parser, main


@pytest.fixture(autouse=True)
def _logging(restore_root_logging):
    yield


class TestMain:
    """Tests for main()."""

    def test_summary(self, capsys) -> None:
        assert main(['--floors', '4', '--seed', '7', '--name', 'SLAB BLOCK']) == 0
        out = capsys.readouterr().out
        assert out.startswith('SLAB BLOCK (seed 7)')
        assert 'Floors: 4, height 12' in out

    def test_json_output(self, capsys) -> None:
        """--json prints only the structure on stdout; logs go to stderr."""
        code = main(['--seed', '42', '--rooftop-garden', '--ground-park', '--city', '--json'])
        captured = capsys.readouterr()
        assert code == 0
        data = json.loads(captured.out)
        assert len(data['floors']) == 5
        assert data['garden'] is not None
        assert data['park'] is not None
        assert data['city'][0]['is_center'] is True
        assert 'Generated' in captured.err

    def test_color_parsed(self, capsys) -> None:
        assert main(['--color', '#ff8000', '--json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['config']['concrete_color'] == [1.0, 128 / 255, 0.0]

    def test_bad_color_fails(self, capsys) -> None:
        assert main(['--color', 'not-a-colour']) == 1
        assert capsys.readouterr().out == ''

    def test_bad_city_size_fails(self) -> None:
        assert main(['--city-size', '-1']) == 1


class TestParser:
    """Tests for argument defaults."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.floors == 5
        assert args.seed == 42.0
        assert args.color == '#cccccc'
        assert args.city_size == 80.0
        assert not args.json
