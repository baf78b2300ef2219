"""Bureaucrats, grades, the forms they sign and execute, and an intern who makes forms."""

__version__ = "0.1.0"

__all__ = ["bureaucrat", "simple_form", "forms", "shrubbery", "intern", "cli"]