import logging

import pytest

from tagcloud.prompts import (
    ACCEPTED, AWAITING_INPUT, VALIDATING, WORD_COUNT_MESSAGE,
    InvalidAnswer, Prompt, PromptCancelled,
    open_for_reading, open_for_writing, parse_word_count, preset_answers)


def scripted(*answers):
    pending = list(answers)

    def read():
        if not pending:
            raise EOFError
        answer = pending.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    return read


@pytest.mark.parametrize("answer", ["", "0", "000", "-3", "+3", " 4", "4 ", "1.5", "ten", "٣"])
def test_parse_word_count_rejects(answer: str) -> None:
    with pytest.raises(InvalidAnswer) as info:
        parse_word_count(answer)
    assert str(info.value) == WORD_COUNT_MESSAGE
    assert not info.value.is_error


def test_parse_word_count_accepts() -> None:
    assert parse_word_count("7") == 7
    assert parse_word_count("0012") == 12


def test_state_transitions() -> None:
    prompt = Prompt("Count: ", parse_word_count, scripted("x", "5"), logging.getLogger("t"))
    assert prompt.state == AWAITING_INPUT
    assert prompt.step() == VALIDATING
    assert prompt.step() == AWAITING_INPUT
    assert prompt.step() == VALIDATING
    assert prompt.step() == ACCEPTED
    assert prompt.value == 5
    assert prompt.attempts == 2


def test_run_retries_until_valid(capsys: pytest.CaptureFixture) -> None:
    prompt = Prompt("Count: ", parse_word_count, scripted("", "abc", "0", "3"), logging.getLogger("t"))
    assert prompt.run() == 3
    out = capsys.readouterr().out
    assert out.count("Count: ") == 4
    assert out.count(WORD_COUNT_MESSAGE) == 3


def test_console_read_failure_is_retried(caplog: pytest.LogCaptureFixture) -> None:
    prompt = Prompt("Count: ", parse_word_count, scripted(OSError("tty"), "2"),
                    logging.getLogger("t"), "number of words")
    with caplog.at_level(logging.ERROR):
        assert prompt.run() == 2
    assert "Error reading number of words from console" in caplog.text


def test_closed_console_cancels() -> None:
    prompt = Prompt("Count: ", parse_word_count, scripted("nope"), logging.getLogger("t"))
    with pytest.raises(PromptCancelled):
        prompt.run()


def test_open_for_reading(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    good = tmp_path / "words.txt"
    good.write_text("hello\n", encoding="utf-8")
    prompt = Prompt("File Input Name: ", open_for_reading(),
                    scripted(str(tmp_path / "missing.txt"), str(tmp_path), str(good)),
                    logging.getLogger("t"))
    with caplog.at_level(logging.ERROR):
        handle = prompt.run()
    with handle:
        assert handle.name == str(good)
        assert handle.read() == "hello\n"
    assert caplog.text.count("Error opening input file") == 2


def test_open_for_writing_truncates(tmp_path) -> None:
    target = tmp_path / "out.html"
    target.write_text("old contents", encoding="utf-8")
    validate = open_for_writing()
    with validate(str(target)):
        pass
    assert target.read_text(encoding="utf-8") == ""
    with pytest.raises(InvalidAnswer, match="Error opening output file"):
        validate(str(tmp_path / "no" / "such" / "dir.html"))


def test_preset_answers_falls_back_to_console() -> None:
    read = preset_answers(4, scripted("console"))
    assert read() == "4"
    assert read() == "console"
    assert preset_answers(None, scripted("only"))() == "only"
