import io

from rullm.spinner import Spinner


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def test_disabled_when_not_a_terminal():
    stream = io.StringIO()
    spinner = Spinner("Generating response", stream)
    assert spinner.disabled
    spinner.start()
    assert not spinner.active
    spinner.stop()
    assert stream.getvalue() == ""


def test_disabled_stop_and_replace_prints_line():
    stream = io.StringIO()
    spinner = Spinner("Generating response", stream)
    spinner.start()
    spinner.stop_and_replace("answer")
    assert stream.getvalue() == "answer\n"


def test_enabled_start_and_stop_clears_line():
    stream = _Terminal()
    spinner = Spinner("Generating response", stream)
    assert not spinner.disabled
    spinner.start()
    assert spinner.active
    spinner.stop()
    assert not spinner.active
    text = stream.getvalue()
    assert "Generating response" in text
    assert text.endswith("\r\x1b[K")


def test_enabled_stop_and_replace():
    stream = _Terminal()
    spinner = Spinner("Assistant:", stream)
    spinner.start()
    spinner.stop_and_replace("Error: boom\n")
    assert not spinner.active
    assert stream.getvalue().endswith("\r\x1b[KError: boom\n")


def test_context_manager_stops():
    stream = _Terminal()
    with Spinner("Working", stream) as spinner:
        assert spinner.active
    assert not spinner.active
    assert stream.getvalue().endswith("\r\x1b[K")