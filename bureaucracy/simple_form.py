"""A plain signable form with fixed signing and execution grades."""

from __future__ import annotations

from bureaucracy.bureaucrat import Bureaucrat


class FormGradeTooHighError(Exception):
    """Raised when a form grade requirement is too high."""

    def __init__(self, message: str = "Form: Grade too high") -> None:
        super().__init__(message)


class FormGradeTooLowError(Exception):
    """Raised when a bureaucrat's grade is too low for the form."""

    def __init__(self, message: str = "Form: Grade too low") -> None:
        super().__init__(message)


class SimpleForm:
    """A form that starts unsigned and can be signed by a sufficiently ranked bureaucrat."""

    def __init__(
        self,
        name: str = "Default Form",
        grade_to_sign: int = 100,
        grade_to_execute: int = 50,
    ) -> None:
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
            raise FormGradeTooLowError()
        self._signed = True

    def __str__(self) -> str:
        return (
            f"Form: {self._name}, Signed: {'Yes' if self._signed else 'No'}, "
            f"Grade to Sign: {self._grade_to_sign}, "
            f"Grade to Execute: {self._grade_to_execute}"
        )

    def __repr__(self) -> str:
        return (
            f"SimpleForm(name={self._name!r}, grade_to_sign={self._grade_to_sign!r}, "
            f"grade_to_execute={self._grade_to_execute!r})"
        )