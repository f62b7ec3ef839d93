import io

import pytest

from shtools.options import OptionError, ShellOptions, format_opt_line


def test_format_opt_line():
    assert format_opt_line("errexit", True) == "errexit\ton\n"
    assert format_opt_line("errexit", False) == "errexit\toff\n"


def test_by_flag():
    opts = ShellOptions()
    assert opts.by_flag("e") == "errexit"
    assert opts.by_flag("f") == "noglob"
    assert opts.by_flag("z") is None


def test_by_name_bash_only_when_asked():
    opts = ShellOptions()
    assert opts.by_name("globstar", True) == "globstar"
    assert opts.by_name("globstar", False) is None
    assert opts.by_name("pipefail", True) == "pipefail"


def test_set_and_get_round_trip():
    opts = ShellOptions()
    opts.set("nullglob", True, True)
    assert opts.get("nullglob", True) is True
    opts.set("nullglob", False, True)
    assert opts.get("nullglob", True) is False


def test_set_unknown_raises():
    opts = ShellOptions()
    with pytest.raises(OptionError):
        opts.set("nope", True)


def test_params_sets_option_and_args():
    opts = ShellOptions()
    params = opts.apply_params(["-e", "--", "foo"])
    assert params == ["foo"]
    assert opts.get("errexit") is True


def test_params_unset_keeps_params():
    opts = ShellOptions()
    opts.set("errexit", True)
    assert opts.apply_params(["+e"]) is None
    assert opts.get("errexit") is False


def test_params_double_dash_clears():
    opts = ShellOptions()
    assert opts.apply_params(["--"]) == []


def test_params_combined_flags():
    opts = ShellOptions()
    opts.apply_params(["-eu"])
    assert opts.get("errexit") and opts.get("nounset")
    assert opts.get("allexport") is False


def test_params_by_long_name():
    opts = ShellOptions()
    opts.apply_params(["-o", "pipefail"])
    assert opts.get("pipefail") is True
    opts.apply_params(["+o", "pipefail"])
    assert opts.get("pipefail") is False


def test_params_invalid_flag():
    opts = ShellOptions()
    with pytest.raises(OptionError, match='invalid option: "-z"'):
        opts.apply_params(["-z"])


def test_params_invalid_long_name():
    opts = ShellOptions()
    with pytest.raises(OptionError, match='invalid option: "globstar"'):
        opts.apply_params(["-o", "globstar"])


def test_params_listing():
    opts = ShellOptions()
    opts.set("errexit", True)
    out = io.StringIO()
    opts.apply_params(["-o"], out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 6
    assert lines[0] == "allexport\toff"
    assert "errexit\ton" in lines


def test_params_set_listing():
    opts = ShellOptions()
    opts.set("errexit", True)
    out = io.StringIO()
    opts.apply_params(["+o"], out)
    lines = out.getvalue().splitlines()
    assert "set -o errexit" in lines
    assert "set +o allexport" in lines


def test_shopt_set_and_show():
    opts = ShellOptions()
    opts.shopt(["-s", "globstar"])
    assert opts.get("globstar", True) is True
    out = io.StringIO()
    opts.shopt(["globstar"], out)
    assert out.getvalue() == format_opt_line("globstar", True)
    opts.shopt(["-u", "globstar"])
    assert opts.get("globstar", True) is False


def test_shopt_lists_bash_options():
    opts = ShellOptions()
    out = io.StringIO()
    opts.shopt([], out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "expand_aliases\toff"
    assert len(lines) == 3


def test_shopt_posix_options():
    opts = ShellOptions()
    opts.shopt(["-o", "-s", "errexit"])
    assert opts.get("errexit") is True
    with pytest.raises(OptionError):
        opts.shopt(["-o", "globstar"])


def test_shopt_errors():
    opts = ShellOptions()
    with pytest.raises(OptionError) as exc:
        opts.shopt(["nope"])
    assert exc.value.status == 1
    with pytest.raises(OptionError) as exc:
        opts.shopt(["-x"])
    assert exc.value.status == 2
    with pytest.raises(OptionError):
        opts.shopt(["-p"])