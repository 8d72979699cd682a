# Role: The fixed cast of the group chat. SPEAKERS is the closed, ordered speaker set every response must cover;
# it is an immutable tuple injected into ChatService rather than mutated at runtime.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Speaker:
    name: str
    house: str
    persona: str

    def prompt_line(self) -> str:
        return f"- {self.name} ({self.house}): {self.persona}"


SPEAKERS: Tuple[Speaker, ...] = (
    Speaker("Aiden", "Gryffindor", 'bold, impulsive, direct; uses "lol", "seriously?" sometimes.'),
    Speaker("Lucas", "Ravenclaw", "analytical, organized; cares about rules, exams, homework, points."),
    Speaker("Maya", "Hufflepuff", "warm mediator; empathetic, supportive, keeps the peace."),
    Speaker("Theo", "Slytherin", "witty, observant; drops rumors, secret passages, clever hints."),
)

# Used when a speaker is missing from an otherwise usable model response.
PLACEHOLDER_TEXT = "..."

# Used when the model response cannot be used at all.
FALLBACK_LINES: Dict[str, str] = {
    "Aiden": "Lol my spell fizzled, say that again?",
    "Lucas": "Something glitched. Try once more.",
    "Maya": "It's okay! What were you saying?",
    "Theo": "Even magic lags. Anyway, did you hear that rumor?",
}


def speaker_names(speakers: Tuple[Speaker, ...] = SPEAKERS) -> Tuple[str, ...]:
    return tuple(s.name for s in speakers)
