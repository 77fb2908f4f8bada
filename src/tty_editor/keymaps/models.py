"""Keymap building blocks: flag tests, named actions and key bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Tuple

Handler = Callable[..., object]


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Requires session flag ``flag`` to equal ``expected``.

    ``WhenClause.parse("!dirty")`` is the negated form.
    """

    flag: str
    expected: bool = True

    @classmethod
    def parse(cls, text: str) -> "WhenClause":
        text = text.strip()
        negated = text.startswith("!")
        flag = text[1:].strip() if negated else text
        if not flag:
            raise ValueError(f"invalid when clause {text!r}")
        return cls(flag, not negated)

    def holds(self, flags: Mapping[str, bool]) -> bool:
        return bool(flags.get(self.flag, False)) == self.expected

    def contradicts(self, other: "WhenClause") -> bool:
        return self.flag == other.flag and self.expected != other.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named editor command; handlers are called as ``handler(context, match)``."""

    id: str
    handler: Handler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("action id cannot be empty")
        if not callable(self.handler):
            raise TypeError(f"handler for action '{self.id}' is not callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Key token to action id within one mode.

    ``when`` accepts ``WhenClause`` objects or their string form.
    """

    id: str
    mode: str
    key: str
    action_id: str
    description: str = ""
    when: Tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        for name in ("id", "mode", "key", "action_id"):
            if not getattr(self, name):
                raise ValueError(f"binding {name} cannot be empty")
        clauses = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(clause)
            for clause in self.when
        )
        object.__setattr__(self, "when", clauses)

    def allows(self, flags: Mapping[str, bool]) -> bool:
        return all(clause.holds(flags) for clause in self.when)

    def excludes(self, other: "Binding") -> bool:
        """True when no combination of flags can satisfy both bindings."""

        return any(
            mine.contradicts(theirs) for mine in self.when for theirs in other.when
        )


__all__ = ["ActionRef", "Binding", "Handler", "WhenClause"]
