"""Command-line demonstrations of bureaucrats, forms and interns."""

from __future__ import annotations

import argparse
import os
import random
import sys
from typing import Sequence

from bureaucracy.bureaucrat import Bureaucrat
from bureaucracy.forms import PresidentialPardonForm, RobotomyRequestForm
from bureaucracy.intern import Intern
from bureaucracy.shrubbery import ShrubberyCreationForm
from bureaucracy.simple_form import SimpleForm

PathArg = "str | os.PathLike[str] | None"


def _report(prefix: str, error: Exception) -> None:
    print(f"{prefix}: {error}", file=sys.stderr)


def run_grades_demo() -> None:
    """Create bureaucrats and move their grades around."""
    try:
        carlota = Bureaucrat("Carlota", 75)
        print(f"{carlota.name} has grade {carlota.grade}")
        carlota.increment_grade(10)
        carlota.decrement_grade(20)
        Bureaucrat("Lucas", 0)
    except Exception as error:
        _report("Exception caught", error)

    print("-----------------------------")

    try:
        xenia = Bureaucrat("Xenia", 150)
        xenia.decrement_grade(10)
    except Exception as error:
        _report("Exception caught", error)


def run_signing_demo() -> None:
    """Have two bureaucrats try to sign a simple form."""
    try:
        carlota = Bureaucrat("carlota", 50)
        lucas = Bureaucrat("lucas", 140)
        tax_form = SimpleForm("Tax Form", 100, 50)
        print(tax_form)
        lucas.sign_form(tax_form)
        carlota.sign_form(tax_form)
        print(tax_form)
    except Exception as error:
        _report("Exception", error)


def run_pardon_demo() -> None:
    """Sign and execute a presidential pardon."""
    try:
        president = Bureaucrat("sami", 1)
        pardon = PresidentialPardonForm("ayOUB")
        print(pardon)
        president.sign_form(pardon)
        print(pardon)
        president.execute_form(pardon)
    except Exception as error:
        _report("Exception", error)


def run_shrubbery_demo(directory: str | os.PathLike[str] | None = None) -> None:
    """Sign and execute a shrubbery creation form."""
    try:
        carlota = Bureaucrat("carlota", 100)
        form = ShrubberyCreationForm("xenia", directory)
        print("Trying to sign the form...")
        carlota.sign_form(form)
        print("Trying to execute the form...")
        carlota.execute_form(form)
        print(f"Form executed. Check the file '{form.output_path}'.")
    except Exception as error:
        _report("An exception occurred", error)


def run_robotomy_demo(rng=None) -> None:
    """Sign a robotomy request and execute it three times."""
    try:
        ayoub = Bureaucrat("ayoub", 40)
        form = RobotomyRequestForm("fran", rng)
        print(form)
        ayoub.sign_form(form)
        print(form)
        for _ in range(3):
            ayoub.execute_form(form)
    except Exception as error:
        _report("Exception caught", error)


def run_intern_demo(
    directory: str | os.PathLike[str] | None = None,
    rng=None,
) -> None:
    """Let an intern create every form, then ask for one that does not exist."""
    try:
        intern = Intern(directory, rng)
        boss = Bureaucrat("Big Boss", 1)

        forms = [
            intern.make_form("shrubbery creation", "Garden"),
            intern.make_form("robotomy request", "Bender"),
            intern.make_form("presidential pardon", "Frodo"),
        ]

        print("\n--- Signing and Executing Forms ---\n")
        for form in forms:
            boss.sign_form(form)
            boss.execute_form(form)

        print("\n--- Invalid Form ---\n")
        intern.make_form("magic banana", "nobody")
    except Exception as error:
        _report("Exception", error)


_DEMOS = ("grades", "signing", "pardon", "shrubbery", "robotomy", "intern")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the demonstrations and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bureaucracy",
        description="Run a demonstration of bureaucrats and their forms.",
    )
    parser.add_argument("demo", nargs="?", choices=_DEMOS, default="intern")
    parser.add_argument(
        "--directory",
        default=None,
        help="where shrubbery files are written (default: current directory)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for robotomy outcomes"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    if args.demo == "grades":
        run_grades_demo()
    elif args.demo == "signing":
        run_signing_demo()
    elif args.demo == "pardon":
        run_pardon_demo()
    elif args.demo == "shrubbery":
        run_shrubbery_demo(args.directory)
    elif args.demo == "robotomy":
        run_robotomy_demo(rng)
    else:
        run_intern_demo(args.directory, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())