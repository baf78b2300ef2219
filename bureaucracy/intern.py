"""An intern who fills out forms by name."""

from __future__ import annotations

import os
from typing import Callable

from bureaucracy.forms import Form, PresidentialPardonForm, RobotomyRequestForm
from bureaucracy.shrubbery import ShrubberyCreationForm


class UnknownFormError(Exception):
    """Raised when the intern is asked for a form that does not exist."""

    def __init__(self, message: str = "InternException: Unknown form requested") -> None:
        super().__init__(message)


class Intern:
    """Creates forms from their human-readable names."""

    def __init__(
        self,
        directory: str | os.PathLike[str] | None = None,
        rng=None,
    ) -> None:
        self._directory = directory
        self._rng = rng

    def _shrubbery(self, target: str) -> Form:
        return ShrubberyCreationForm(target, self._directory)

    def _robotomy(self, target: str) -> Form:
        return RobotomyRequestForm(target, self._rng)

    def _pardon(self, target: str) -> Form:
        return PresidentialPardonForm(target)

    def make_form(self, form_name: str, target: str) -> Form:
        """Create the form called ``form_name`` aimed at ``target``."""
        creators: dict[str, Callable[[str], Form]] = {
            "shrubbery creation": self._shrubbery,
            "robotomy request": self._robotomy,
            "presidential pardon": self._pardon,
        }
        try:
            create = creators[form_name]
        except KeyError:
            raise UnknownFormError() from None
        print(f"Intern creates {form_name}")
        return create(target)