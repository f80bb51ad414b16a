from pathlib import Path

import pytest

from dlp_utils import BACKENDS, answer_path_for, format_output, load_answer, load_input, write_case
from dlp_utils.io_utils import case_number


def test_write_then_load(tmp_path, backend):
    path = tmp_path / 'case_1.txt'
    write_case(path, 2039, 4, 1024, 10)
    p, g, h, x_max_exp = load_input(path, backend)
    assert (p, g, h, x_max_exp) == (2039, 4, 1024, 10)
    assert type(p) is backend.type
    assert type(x_max_exp) is int


def test_load_defaults_to_bigint(tmp_path):
    path = tmp_path / 'case_1.txt'
    path.write_text("11\n2\n\n8\n10\n")
    p, g, h, x_max_exp = load_input(path)
    assert type(p) is BACKENDS['bigint'].type
    assert (p, g, h, x_max_exp) == (11, 2, 8, 10)


def test_load_rejects_short_file(tmp_path):
    path = tmp_path / 'case_1.txt'
    path.write_text("11\n2\n8\n")
    with pytest.raises(ValueError, match="expected 4 lines"):
        load_input(path)


def test_load_rejects_negative_bound(tmp_path):
    path = tmp_path / 'case_1.txt'
    path.write_text("11\n2\n8\n-1\n")
    with pytest.raises(ValueError, match="non-negative"):
        load_input(path)


def test_load_rejects_garbage(tmp_path):
    path = tmp_path / 'case_1.txt'
    path.write_text("eleven\n2\n8\n10\n")
    with pytest.raises(ValueError):
        load_input(path)


@pytest.mark.parametrize("name,expected", [
    ('testcase_1.txt', 'answer_1.txt'),
    ('case_12.txt', 'answer_12.txt'),
])
def test_answer_path_for(name, expected):
    assert answer_path_for(Path('some/dir') / name) == Path('some/dir') / expected


def test_answer_path_for_other_names():
    assert answer_path_for(Path('notes.txt')) is None
    assert case_number(Path('answer_1.txt')) is None


def test_load_answer(tmp_path):
    assert load_answer(tmp_path / 'answer_9.txt') is None
    (tmp_path / 'answer_1.txt').write_text("375374217830\n")
    assert load_answer(tmp_path / 'answer_1.txt') == 375374217830
    (tmp_path / 'answer_2.txt').write_text("  \n")
    assert load_answer(tmp_path / 'answer_2.txt') is None


def test_challenge_files_present():
    root = Path(__file__).parent.parent / 'input'
    p, g, h, x_max_exp = load_input(root / 'testcase_1.txt')
    assert p > 2 ** 511
    assert x_max_exp == 40
    assert load_answer(answer_path_for(root / 'testcase_1.txt')) == 375374217830


def test_format_output():
    out = format_output(3, 0.5, True, expected=3)
    assert "Solution: x = 3" in out
    assert "Verification (g^x = h mod p): PASSED" in out
    assert "Cross-check (vs answer file): PASSED" in out

    out = format_output(3, 0.5, False)
    assert "FAILED" in out
    assert "Cross-check" not in out
