import io

import pytest

from regionfile.cli import main, extract_chunk, inspect_region
from regionfile.exceptions import UnsafeOutputTarget


class FakeTerminal(io.StringIO):

    def isatty(self):
        return True


@pytest.fixture
def region_path(tmp_path, region_factory, zlib_block):
    path = tmp_path / 'r.0.0.mca'
    path.write_bytes(region_factory(
        slots={0: b'\x00\x00\x02\x01', 5: b'\x00\x00\x03\x02'},
        blocks={2: zlib_block(b'first'), 3: zlib_block(b'hello')},
    ))
    return str(path)


def test_inspect(region_path, capsys):
    assert main(['inspect', '-f', region_path]) == 0

    assert capsys.readouterr().out.splitlines() == [
        'ID    Start End   Size  ',
        '0     2     3     1     ',
        '5     3     5     2     ',
    ]


def test_inspect_machine(region_path, capsys):
    assert main(['inspect', '--machine', '--file', region_path]) == 0

    assert capsys.readouterr().out.splitlines() == [
        '0     2     3     1     ',
        '5     3     5     2     ',
    ]


def test_inspect_region_to_buffer(region_path):
    out = io.StringIO()

    inspect_region(region_path, machine=True, out=out)

    assert out.getvalue() == '0     2     3     1     \n5     3     5     2     \n'


def test_extract(region_path, capsysbinary):
    assert main(['extract', '-f', region_path, '-c', '5']) == 0

    assert capsysbinary.readouterr().out == b'hello'


def test_extract_chunk_to_binary_buffer(region_path):
    out = io.BytesIO()

    extract_chunk(region_path, 0, out=out)

    assert out.getvalue() == b'first'


def test_extract_refuses_terminal(tmp_path):
    # the check comes before opening the file
    with pytest.raises(UnsafeOutputTarget) as e:
        extract_chunk(str(tmp_path / 'missing.mca'), 5, out=FakeTerminal())

    assert 'refusing to output to a tty' in str(e.value)


def test_extract_not_found(region_path, capsysbinary):
    assert main(['extract', '-f', region_path, '-c', '999']) == 1

    captured = capsysbinary.readouterr()
    assert captured.out == b''
    assert b'error: no chunk with ID 999' in captured.err


def test_missing_file(tmp_path, capsys):
    assert main(['inspect', '-f', str(tmp_path / 'missing.mca')]) == 1

    assert 'error: failed to open region file' in capsys.readouterr().err


def test_wrong_arguments(capsys):
    with pytest.raises(SystemExit) as e:
        main(['extract', '-f', 'r.0.0.mca'])

    assert e.value.code == 2

    with pytest.raises(SystemExit):
        main([])
