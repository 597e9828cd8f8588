import pytest

from draughtscore.bitbase_comp import (
    BLOCK_SIZE,
    CompressedTable,
    code_length,
    code_value,
)


def _expand(data):
    return [code_value(b) for b in data for _ in range(code_length(b))]


def test_code_value_cycles_through_three_values():
    assert [code_value(b) for b in range(6)] == [0, 1, 2, 0, 1, 2]


def test_first_run_length_is_one():
    assert code_length(0) == 1
    assert code_length(1) == code_length(2) == code_length(0)


def test_run_lengths_never_shrink_within_used_codes():
    lengths = [code_length(b) for b in range(0, 255, 3)]
    assert lengths == sorted(lengths)
    assert lengths[-1] > lengths[0]


def test_last_byte_code_is_empty():
    assert code_length(255) == 0


def test_single_block_round_trip():
    data = bytes([0, 1, 2, 10, 4])
    size = sum(code_length(b) for b in data)
    table = CompressedTable.from_bytes(data, size)
    assert len(table) == size
    assert [table[i] for i in range(size)] == _expand(data)


def test_size_mismatch_is_rejected():
    data = bytes([0, 1, 2])
    with pytest.raises(ValueError):
        CompressedTable.from_bytes(data, 4)


@pytest.mark.parametrize("pos", [-1, 3, 100])
def test_out_of_range_index(pos):
    table = CompressedTable.from_bytes(bytes([0, 1, 2]), 3)
    with pytest.raises(IndexError):
        table[pos]
    assert len(table) == 3
    assert [table[i] for i in range(3)] == [0, 1, 2]


def test_load_from_file(tmp_path):
    data = bytes([5, 30, 2, 0, 61])
    path = tmp_path / "table.bin"
    path.write_bytes(data)
    expected = _expand(data)
    table = CompressedTable.load(path, len(expected))
    assert [table[i] for i in range(len(table))] == expected


def test_load_with_wrong_size_names_file(tmp_path):
    path = tmp_path / "broken.bin"
    path.write_bytes(bytes([0, 0]))
    with pytest.raises(ValueError, match="broken.bin"):
        CompressedTable.load(path, 5)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CompressedTable.load(tmp_path / "absent.bin", 1)