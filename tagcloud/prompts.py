"""
prompts.py - Console Prompts with Retry

Each prompt is a small state machine:

    AWAITING_INPUT --answer read--> VALIDATING --accepted--> ACCEPTED
          ^                              |
          +-------- answer rejected -----+

A rejected answer is reported and the prompt is asked again, with no
limit on the number of attempts. Only a closed console (EOF) ends a
prompt without an accepted value.
"""

import re

AWAITING_INPUT = "awaiting-input"
VALIDATING = "validating"
ACCEPTED = "accepted"

WORD_COUNT_MESSAGE = "Number of words must be an integer greater than 0."


class PromptError(Exception):
    pass


class InvalidAnswer(PromptError):
    """
    Raised by a validator to reject an answer.

    Args:
        message: Text reported to the user
        is_error: Report on the error stream (True) or as a console hint
    """

    def __init__(self, message, is_error=True):
        super().__init__(message)
        self.is_error = is_error


class PromptCancelled(PromptError):
    pass


class Prompt(object):
    """
    A console question that is repeated until its answer validates.

    Args:
        label: Text printed before each answer is read
        validate: Callable turning an answer into the accepted value,
            raising InvalidAnswer to reject it
        read_answer: Callable returning the next answer line
        logger: Receives console read failures and rejected answers
        subject: What is being asked for, used in read failure messages
    """

    def __init__(self, label, validate, read_answer, logger, subject="answer"):
        self.label = label
        self.validate = validate
        self.read_answer = read_answer
        self.logger = logger
        self.subject = subject

        self.state = AWAITING_INPUT
        self.answer = None
        self.value = None
        self.attempts = 0

    def step(self):
        """Perform one state transition and return the new state."""
        if self.state == AWAITING_INPUT:
            print(self.label)
            try:
                self.answer = self.read_answer()
            except EOFError:
                raise PromptCancelled(f"Console closed while reading {self.subject}")
            except OSError:
                self.logger.error(f"Error reading {self.subject} from console")
                return self.state
            self.attempts += 1
            self.state = VALIDATING

        elif self.state == VALIDATING:
            try:
                self.value = self.validate(self.answer)
            except InvalidAnswer as err:
                if err.is_error:
                    self.logger.error(str(err))
                else:
                    print(str(err))
                self.state = AWAITING_INPUT
            else:
                self.state = ACCEPTED

        return self.state

    def run(self):
        """Step until an answer is accepted and return its value."""
        while self.state != ACCEPTED:
            self.step()
        return self.value


def preset_answers(preset, read=input):
    """
    Return an answer reader that yields `preset` once, then reads from `read`.

    A None preset goes straight to `read`.
    """
    pending = [] if preset is None else [str(preset)]

    def read_answer():
        if pending:
            return pending.pop()
        return read()

    return read_answer


def open_for_reading(encoding="utf-8", errors="replace"):
    def validate(path):
        try:
            return open(path, "r", encoding=encoding, errors=errors)
        except (OSError, ValueError):
            raise InvalidAnswer("Error opening input file")
    return validate


def open_for_writing(encoding="utf-8"):
    def validate(path):
        try:
            return open(path, "w", encoding=encoding)
        except (OSError, ValueError):
            raise InvalidAnswer("Error opening output file")
    return validate


def parse_word_count(answer):
    """Accept a non-empty string of ASCII digits whose value is above zero."""
    if not re.fullmatch(r"[0-9]+", answer) or int(answer) <= 0:
        raise InvalidAnswer(WORD_COUNT_MESSAGE, is_error=False)
    return int(answer)
