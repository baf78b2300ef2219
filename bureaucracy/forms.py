"""Executable forms: an abstract base plus the robotomy and pardon forms."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol

from bureaucracy.bureaucrat import (
    HIGHEST_GRADE,
    LOWEST_GRADE,
    Bureaucrat,
    GradeTooHighError,
    GradeTooLowError,
)


class FormNotSignedError(Exception):
    """Raised when an unsigned form is executed."""

    def __init__(self, message: str = "Form not signed") -> None:
        super().__init__(message)


class _CoinSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Form(ABC):
    """A form with signing and execution grade requirements and a concrete action."""

    def __init__(
        self,
        name: str = "default",
        grade_to_sign: int = LOWEST_GRADE,
        grade_to_execute: int = LOWEST_GRADE,
    ) -> None:
        if grade_to_sign < HIGHEST_GRADE or grade_to_execute < HIGHEST_GRADE:
            raise GradeTooHighError()
        if grade_to_sign > LOWEST_GRADE or grade_to_execute > LOWEST_GRADE:
            raise GradeTooLowError()
        self._name = name
        self._grade_to_sign = grade_to_sign
        self._grade_to_execute = grade_to_execute
        self._signed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def signed(self) -> bool:
        return self._signed

    @property
    def grade_to_sign(self) -> int:
        return self._grade_to_sign

    @property
    def grade_to_execute(self) -> int:
        return self._grade_to_execute

    def be_signed(self, bureaucrat: Bureaucrat) -> None:
        """Mark the form signed, or raise if the bureaucrat's grade is too low."""
        if bureaucrat.grade > self._grade_to_sign:
            raise GradeTooLowError()
        self._signed = True

    def execute(self, executor: Bureaucrat) -> None:
        """Carry out the form's action once it is signed and the executor ranks high enough."""
        if not self._signed:
            raise FormNotSignedError()
        if executor.grade > self._grade_to_execute:
            raise GradeTooLowError()
        self._perform()

    @abstractmethod
    def _perform(self) -> None:
        """The form-specific action, run after all checks have passed."""

    def __str__(self) -> str:
        return (
            f"Form {self._name} [Sign grade: {self._grade_to_sign}, "
            f"Exec grade: {self._grade_to_execute}, "
            f"Signed: {'Yes' if self._signed else 'No'}]"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"grade_to_sign={self._grade_to_sign!r}, "
            f"grade_to_execute={self._grade_to_execute!r}, signed={self._signed!r})"
        )


class RobotomyRequestForm(Form):
    """Drills noisily; the robotomy succeeds half of the time."""

    def __init__(self, target: str = "default", rng: _CoinSource | None = None) -> None:
        super().__init__("RobotomyRequestForm", 72, 45)
        self._target = target
        self._rng: _CoinSource = rng if rng is not None else random.Random()

    @property
    def target(self) -> str:
        return self._target

    def _perform(self) -> None:
        print("Bzzzz... Bzzzz... (drilling noises)")
        if self._rng.randrange(2):
            print(f"{self._target} has been robotomized successfully.")
        else:
            print(f"Robotomy failed on {self._target}.")


class PresidentialPardonForm(Form):
    """Announces that the target has been pardoned."""

    def __init__(self, target: str = "default") -> None:
        super().__init__("PresidentialPardonForm", 25, 5)
        self._target = target

    @property
    def target(self) -> str:
        return self._target

    def _perform(self) -> None:
        print(f"{self._target} has been pardoned by Zaphod Beeblebrox.")