"""Bureaucrats: named officials holding a grade from 1 (highest) to 150 (lowest)."""

from __future__ import annotations

from typing import Protocol

HIGHEST_GRADE = 1
LOWEST_GRADE = 150


class GradeTooHighError(Exception):
    """Raised when a grade is above the highest allowed grade."""

    def __init__(self, message: str = "Grade too high") -> None:
        super().__init__(message)


class GradeTooLowError(Exception):
    """Raised when a grade is below the lowest allowed grade."""

    def __init__(self, message: str = "Grade too low") -> None:
        super().__init__(message)


class _Signable(Protocol):
    @property
    def name(self) -> str: ...

    def be_signed(self, bureaucrat: Bureaucrat) -> None: ...


class _Executable(Protocol):
    @property
    def name(self) -> str: ...

    def execute(self, executor: Bureaucrat) -> None: ...


class Bureaucrat:
    """An official with an immutable name and a grade that can move up or down."""

    def __init__(self, name: str = "Default", grade: int = LOWEST_GRADE) -> None:
        if grade < HIGHEST_GRADE:
            raise GradeTooHighError()
        if grade > LOWEST_GRADE:
            raise GradeTooLowError()
        self._name = name
        self._grade = grade
        print(f"{name} bureaucrat created with grade {grade}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def grade(self) -> int:
        return self._grade

    def increment_grade(self, amount: int) -> None:
        """Raise the grade (lower its number) by ``amount``; it must be at least 1."""
        if amount < 1:
            raise GradeTooLowError()
        self._grade -= amount
        print(f"{self._name} bureaucrat grade {self._grade}")

    def decrement_grade(self, amount: int) -> None:
        """Lower the grade (raise its number) by ``amount``; it may not exceed 150."""
        if amount > LOWEST_GRADE:
            raise GradeTooLowError()
        self._grade += amount
        print(f"{self._name} bureaucrat grade {self._grade}")

    def sign_form(self, form: _Signable) -> bool:
        """Try to sign ``form``, report the outcome, and return whether it worked."""
        try:
            form.be_signed(self)
        except Exception as error:
            print(f"{self._name} couldn't sign {form.name} because {error}")
            return False
        print(f"{self._name} signed {form.name}")
        return True

    def execute_form(self, form: _Executable) -> bool:
        """Try to execute ``form``, report the outcome, and return whether it worked."""
        try:
            form.execute(self)
        except Exception as error:
            print(f"{self._name} couldn't execute {form.name} because: {error}")
            return False
        print(f"{self._name} executed {form.name}")
        return True

    def __str__(self) -> str:
        return f"{self._name}, bureaucrat grade {self._grade}"

    def __repr__(self) -> str:
        return f"Bureaucrat(name={self._name!r}, grade={self._grade!r})"