import pygame
import pytest

from uyta.tutorial import COMPLETED_MESSAGE, DEFAULT_STEP_LABELS, Tutorial, TutorialStep


class RecordingFont:
    def __init__(self):
        self.rendered = []

    def render(self, text, antialias, color):
        self.rendered.append((text, color))
        return pygame.Surface((4, 4))


def test_default_steps_not_completed():
    tutorial = Tutorial()
    assert [step.label for step in tutorial.steps] == list(DEFAULT_STEP_LABELS)
    assert not any(step.completed for step in tutorial.steps)
    assert tutorial.hidden is False
    assert tutorial.all_completed() is False


def test_text_marks_steps():
    tutorial = Tutorial()
    tutorial.complete_step(0)
    lines = tutorial.text().splitlines()
    assert lines[0] == f"[+] {DEFAULT_STEP_LABELS[0]}"
    assert lines[1] == f"[ ] {DEFAULT_STEP_LABELS[1]}"
    assert tutorial.text().endswith("\n")


def test_complete_step_out_of_range():
    with pytest.raises(IndexError):
        Tutorial().complete_step(5)


def test_all_completed_after_every_step():
    tutorial = Tutorial()
    tutorial.complete_step(0)
    tutorial.complete_step(1)
    assert tutorial.all_completed() is True


def test_close_requires_completion():
    tutorial = Tutorial()
    tutorial.complete_step(0)
    tutorial.close_tutorial(True)
    assert tutorial.hidden is False


def test_close_requires_key():
    tutorial = Tutorial(steps=[TutorialStep("a", completed=True)])
    tutorial.close_tutorial(False)
    assert tutorial.hidden is False
    tutorial.close_tutorial(True)
    assert tutorial.hidden is True


def test_draw_hidden_renders_nothing():
    tutorial = Tutorial(hidden=True)
    font = RecordingFont()
    tutorial.draw(pygame.Surface((100, 100)), font)
    assert font.rendered == []


def test_draw_lists_steps():
    tutorial = Tutorial()
    font = RecordingFont()
    tutorial.draw(pygame.Surface((200, 200)), font)
    texts = [text for text, _ in font.rendered]
    assert texts == tutorial.text().splitlines()
    assert COMPLETED_MESSAGE not in texts


def test_draw_shows_completion_message():
    tutorial = Tutorial()
    tutorial.complete_step(0)
    tutorial.complete_step(1)
    font = RecordingFont()
    tutorial.draw(pygame.Surface((200, 200)), font)
    assert font.rendered[0][0] == COMPLETED_MESSAGE
    assert len(font.rendered) == len(tutorial.steps) + 1