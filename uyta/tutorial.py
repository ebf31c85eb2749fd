"""On-screen checklist that introduces the controls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

FONT_SIZE = 24
TEXT_COLOR = (245, 245, 245)
DONE_COLOR = (255, 140, 0)

DEFAULT_STEP_LABELS = (
    "Перемещайте камеру при помощи [W, A, S, D]",
    "Посадите морковь на острове при помощи [ЛКМ]",
)
COMPLETED_MESSAGE = "Вы прошли обучение! Нажмите [F1], чтобы скрыть подсказки"


@dataclass
class TutorialStep:
    """One task of the tutorial."""

    label: str
    completed: bool = False


def _default_steps() -> List[TutorialStep]:
    return [TutorialStep(label) for label in DEFAULT_STEP_LABELS]


@dataclass
class Tutorial:
    """A list of steps that the player ticks off by playing."""

    steps: List[TutorialStep] = field(default_factory=_default_steps)
    hidden: bool = False

    def complete_step(self, index: int) -> None:
        """Mark the step at ``index`` as done."""
        self.steps[index].completed = True

    def all_completed(self) -> bool:
        """Whether every step is done."""
        return all(step.completed for step in self.steps)

    def text(self) -> str:
        """The checklist, one ``[mark] label`` line per step."""
        return "".join(
            f"[{'+' if step.completed else ' '}] {step.label}\n" for step in self.steps
        )

    def close_tutorial(self, f1_pressed: bool) -> None:
        """Hide the tutorial once finished and F1 has been pressed."""
        if self.hidden or not self.all_completed():
            return
        if f1_pressed:
            self.hidden = True

    def draw(self, surface: Any, font: Any) -> None:
        """Draw the checklist in the lower-left corner of ``surface``."""
        if self.hidden:
            return

        base_y = surface.get_height() - FONT_SIZE * len(self.steps)

        if self.all_completed():
            rendered = font.render(COMPLETED_MESSAGE, True, DONE_COLOR)
            surface.blit(rendered, (10, base_y - 34))

        for row, line in enumerate(self.text().splitlines()):
            rendered = font.render(line, True, TEXT_COLOR)
            surface.blit(rendered, (10, base_y - 10 + row * FONT_SIZE))