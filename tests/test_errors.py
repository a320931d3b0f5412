import io

from cubraycaster.errors import CubError, error_msg, success_msg


def test_error_msg_format():
    stream = io.StringIO()
    error_msg("Invalid map area", stream)
    assert stream.getvalue() == "\033[1;31mError\nInvalid map area\n\n\033[0m"


def test_success_msg_format():
    stream = io.StringIO()
    success_msg("Parsing successful!", stream)
    assert stream.getvalue() == "\033[1;32m\nParsing successful!\n\n\033[0m"


def test_error_msg_defaults_to_stdout(capsys):
    error_msg("No rgb value found")
    captured = capsys.readouterr()
    assert "Error\nNo rgb value found\n" in captured.out
    assert captured.err == ""


def test_success_msg_defaults_to_stdout(capsys):
    success_msg("Thanks for playing! :)")
    assert "Thanks for playing! :)" in capsys.readouterr().out


def test_cub_error_carries_message():
    exc = CubError("Invalid resolution")
    assert str(exc) == "Invalid resolution"
    assert exc.args == ("Invalid resolution",)
    assert isinstance(exc, Exception)


def test_cub_error_message_reported():
    stream = io.StringIO()
    try:
        raise CubError("Enter path for every texture")
    except CubError as exc:
        error_msg(str(exc), stream)
    assert "Enter path for every texture" in stream.getvalue()
    assert issubclass(CubError, Exception)