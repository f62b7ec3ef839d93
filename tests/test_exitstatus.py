import pytest

from shtools.exitstatus import ExitStatus, is_exit_status, new_exit_status


def test_message():
    assert str(new_exit_status(130)) == "exit status 130"


@pytest.mark.parametrize("status", [1, 127, 130, 137, 143, 255])
def test_round_trip(status):
    assert is_exit_status(new_exit_status(status)) == status


def test_equality_by_value():
    assert new_exit_status(137) == new_exit_status(137)
    assert new_exit_status(137) != new_exit_status(143)


def test_wraps_to_byte():
    assert new_exit_status(256 + 2).status == 2


def test_not_exit_status():
    assert is_exit_status(ValueError("boom")) is None
    assert is_exit_status(None) is None


def test_wrapped_exit_status():
    try:
        try:
            raise new_exit_status(143)
        except ExitStatus as inner:
            raise RuntimeError("wrapped") from inner
    except RuntimeError as outer:
        assert is_exit_status(outer) == 143


def test_raise_and_catch():
    err = new_exit_status(127)
    with pytest.raises(ExitStatus) as info:
        raise err
    assert info.value.status == 127
    assert str(info.value) == "exit status 127"
    assert is_exit_status(info.value) == 127