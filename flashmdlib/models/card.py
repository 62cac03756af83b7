from dataclasses import dataclass, field


@dataclass
class Card:
    """ A single flashcard. The title is the front face and the body the back face """
    title: str
    body: str = ""
    # Recall outcomes, append only. Nothing schedules on this yet
    history: list[bool] = field(default_factory=list)

    def record(self, success: bool) -> None:
        self.history.append(success)

    def __repr__(self) -> str:
        body = "..." if self.body else "''"
        return f"Card(title={self.title!r}, body={body}, history={len(self.history)})"
