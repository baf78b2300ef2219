# bureaucracy

A small model of an office in which bureaucrats, ranked by grade, sign and
execute forms.

## What is in it

- `bureaucracy.bureaucrat`
  - `Bureaucrat(name="Default", grade=150)`: grades run from 1 (highest) to
    150 (lowest). A grade below 1 raises `GradeTooHighError`, above 150
    raises `GradeTooLowError`. The bureaucrat has read-only `name` and
    `grade` properties.
  - `increment_grade(amount)` lowers the grade number by `amount` and raises
    `GradeTooLowError` if `amount` is less than 1. `decrement_grade(amount)`
    raises the grade number by `amount` and raises `GradeTooLowError` if
    `amount` is greater than 150. The resulting grade is not range-checked.
  - `sign_form(form)` and `execute_form(form)` print what happened and return
    `True` on success or `False` on failure instead of raising.
- `bureaucracy.simple_form.SimpleForm(name="Default Form", grade_to_sign=100,
  grade_to_execute=50)`: a form that can only be signed. `be_signed(bureaucrat)`
  raises `FormGradeTooLowError` if the bureaucrat's grade number is above
  `grade_to_sign`.
- `bureaucracy.forms.Form`: an abstract, executable form. Both grades must lie
  in 1..150 or `GradeTooHighError` / `GradeTooLowError` is raised.
  `be_signed(bureaucrat)` raises `GradeTooLowError` when the grade is too low;
  `execute(executor)` raises `FormNotSignedError` on an unsigned form and
  `GradeTooLowError` when the executor ranks too low. Concrete forms:
  - `RobotomyRequestForm(target="default", rng=None)` (sign 72, execute 45)
    drills noisily and succeeds half of the time; pass any object with a
    `randrange` method (such as `random.Random(seed)`) to make it repeatable.
  - `PresidentialPardonForm(target="default")` (sign 25, execute 5) pardons
    its target.
- `bureaucracy.shrubbery.ShrubberyCreationForm(target, directory=None)`
  (sign 145, execute 137) writes an ASCII tree to `<target>_shrubbery`, in
  `directory` or the current directory. Its `output_path` property tells where.
  If the file cannot be opened, an error is printed to standard error.
- `bureaucracy.intern.Intern(directory=None, rng=None)`: `make_form(form_name,
  target)` builds a form from one of the names `"shrubbery creation"`,
  `"robotomy request"` or `"presidential pardon"`; any other name raises
  `UnknownFormError`. `directory` and `rng` are passed on to the forms it makes.

## Installation

```
pip install .
```

## Usage

```python
from bureaucracy.bureaucrat import Bureaucrat
from bureaucracy.intern import Intern

boss = Bureaucrat("Big Boss", 1)
form = Intern().make_form("presidential pardon", "Frodo")
boss.sign_form(form)
boss.execute_form(form)
print(form)
```

To get the exception rather than a printed report, call
`form.be_signed(bureaucrat)` or `form.execute(bureaucrat)` directly.

## Command line

```
bureaucracy [grades|signing|pardon|shrubbery|robotomy|intern] [--directory DIR] [--seed N]
```

runs one demonstration scenario; without a name it runs `intern`.
`--directory` chooses where shrubbery files are written, `--seed` makes
robotomy outcomes repeatable. `bureaucracy --help` lists the options.

## What it does not do

Bureaucrats and forms live only in memory; nothing is saved or loaded. The
only file the package writes is the shrubbery tree.

## Running the tests

```
pip install .[test]
pytest
```