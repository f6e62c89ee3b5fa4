"""ValidationResult — validation failures located within an argument list."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ArgumentError:
    """One failure, located by argument index and a path inside that argument.

    ``index=None`` means the argument list as a whole (for example a wrong
    number of arguments).
    """

    message: str
    index: int | None = None
    path: tuple[str | int, ...] = ()

    @property
    def location(self) -> str:
        """Dotted location such as ``"0"`` or ``"1.name"``; ``"args"`` for the list."""
        if self.index is None:
            return "args"
        return ".".join(str(part) for part in (self.index, *self.path))


@dataclass
class ValidationResult:
    """Outcome of validating one argument list.

    Usage::

        result = ValidationResult.success()
        result.add(0, "must be positive")
        result.for_argument(0)  # [ArgumentError("must be positive", 0)]
        result.errors           # {"0": ["must be positive"]}
    """

    problems: list[ArgumentError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, *problems: ArgumentError) -> ValidationResult:
        return cls(problems=list(problems))

    def add(
        self, index: int | None, message: str, path: tuple[str | int, ...] = ()
    ) -> None:
        """Record a failure for argument *index* (``None`` for the whole list)."""
        self.problems.append(ArgumentError(message, index, path))

    def for_argument(self, index: int) -> list[ArgumentError]:
        """Failures located in argument *index*, nested paths included."""
        return [p for p in self.problems if p.index == index]

    @property
    def errors(self) -> dict[str, list[str]]:
        """Messages grouped by :attr:`ArgumentError.location`."""
        grouped: dict[str, list[str]] = {}
        for problem in self.problems:
            grouped.setdefault(problem.location, []).append(problem.message)
        return grouped

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding the failures of both, in order."""
        return ValidationResult(problems=[*self.problems, *other.problems])

    def __bool__(self) -> bool:
        return self.is_valid
