import pytest

from bureaucracy.bureaucrat import Bureaucrat, GradeTooHighError, GradeTooLowError
from bureaucracy.forms import (
    Form,
    FormNotSignedError,
    PresidentialPardonForm,
    RobotomyRequestForm,
)


class _FixedCoin:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        return self.value


class _RecordingForm(Form):
    def __init__(self, name, grade_to_sign, grade_to_execute):
        super().__init__(name, grade_to_sign, grade_to_execute)
        self.performed = 0

    def _perform(self):
        self.performed += 1


def _blank_form():
    """An uninitialised concrete form, for driving Form.__init__ directly."""
    return _RecordingForm.__new__(_RecordingForm)


def _bureaucrat(capsys, name, grade):
    b = Bureaucrat(name, grade)
    capsys.readouterr()
    return b


def test_form_base_is_abstract():
    with pytest.raises(TypeError):
        Form("x", 10, 10)


@pytest.mark.parametrize("sign, execute", [(0, 10), (10, 0)])
def test_grade_requirement_too_high(sign, execute):
    with pytest.raises(GradeTooHighError):
        Form.__init__(_blank_form(), "x", sign, execute)


@pytest.mark.parametrize("sign, execute", [(151, 10), (10, 151)])
def test_grade_requirement_too_low(sign, execute):
    with pytest.raises(GradeTooLowError):
        Form.__init__(_blank_form(), "x", sign, execute)


def test_boundary_grades_accepted():
    form = _blank_form()
    Form.__init__(form, "edge", 1, 150)
    assert (form.grade_to_sign, form.grade_to_execute) == (1, 150)
    assert form.signed is False


def test_pardon_form_attributes():
    form = PresidentialPardonForm("ayOUB")
    assert form.name == "PresidentialPardonForm"
    assert form.grade_to_sign == 25
    assert form.grade_to_execute == 5
    assert form.target == "ayOUB"
    assert form.signed is False


def test_robotomy_form_attributes():
    form = RobotomyRequestForm("fran")
    assert form.name == "RobotomyRequestForm"
    assert form.grade_to_sign == 72
    assert form.grade_to_execute == 45
    assert form.target == "fran"


def test_default_targets():
    assert PresidentialPardonForm().target == "default"
    assert RobotomyRequestForm().target == "default"


def test_str_unsigned_and_signed(capsys):
    form = PresidentialPardonForm("ayOUB")
    assert str(form) == (
        "Form PresidentialPardonForm [Sign grade: 25, Exec grade: 5, Signed: No]"
    )
    form.be_signed(_bureaucrat(capsys, "sami", 1))
    assert str(form).endswith("Signed: Yes]")


def test_be_signed_at_exact_grade(capsys):
    form = RobotomyRequestForm("fran")
    form.be_signed(_bureaucrat(capsys, "clerk", 72))
    assert form.signed is True


def test_be_signed_grade_too_low(capsys):
    form = RobotomyRequestForm("fran")
    with pytest.raises(GradeTooLowError):
        form.be_signed(_bureaucrat(capsys, "clerk", 73))
    assert form.signed is False


def test_execute_unsigned_raises(capsys):
    form = PresidentialPardonForm("ayOUB")
    with pytest.raises(FormNotSignedError) as info:
        form.execute(_bureaucrat(capsys, "sami", 1))
    assert str(info.value) == "Form not signed"


def test_unsigned_check_comes_before_grade_check(capsys):
    form = PresidentialPardonForm("ayOUB")
    with pytest.raises(FormNotSignedError):
        form.execute(_bureaucrat(capsys, "lowly", 150))


def test_execute_grade_too_low(capsys):
    form = PresidentialPardonForm("ayOUB")
    form.be_signed(_bureaucrat(capsys, "sami", 1))
    with pytest.raises(GradeTooLowError):
        form.execute(_bureaucrat(capsys, "deputy", 6))


def test_execute_runs_action_once(capsys):
    form = _RecordingForm("rec", 10, 10)
    boss = _bureaucrat(capsys, "boss", 10)
    form.be_signed(boss)
    form.execute(boss)
    assert form.performed == 1


def test_pardon_output(capsys):
    form = PresidentialPardonForm("ayOUB")
    boss = _bureaucrat(capsys, "sami", 1)
    form.be_signed(boss)
    form.execute(boss)
    assert capsys.readouterr().out == (
        "ayOUB has been pardoned by Zaphod Beeblebrox.\n"
    )


def test_robotomy_success(capsys):
    coin = _FixedCoin(1)
    form = RobotomyRequestForm("fran", coin)
    b = _bureaucrat(capsys, "ayoub", 40)
    form.be_signed(b)
    form.execute(b)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Bzzzz... Bzzzz... (drilling noises)",
        "fran has been robotomized successfully.",
    ]
    assert coin.calls == 1


def test_robotomy_failure(capsys):
    form = RobotomyRequestForm("fran", _FixedCoin(0))
    b = _bureaucrat(capsys, "ayoub", 40)
    form.be_signed(b)
    form.execute(b)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Robotomy failed on fran."


def test_bureaucrat_execute_form_reports_success(capsys):
    form = PresidentialPardonForm("ayOUB")
    boss = _bureaucrat(capsys, "sami", 1)
    assert boss.sign_form(form) is True
    capsys.readouterr()
    assert boss.execute_form(form) is True
    assert capsys.readouterr().out.splitlines()[-1] == "sami executed PresidentialPardonForm"


def test_bureaucrat_execute_form_reports_failure(capsys):
    form = PresidentialPardonForm("ayOUB")
    boss = _bureaucrat(capsys, "sami", 1)
    assert boss.execute_form(form) is False
    assert capsys.readouterr().out == (
        "sami couldn't execute PresidentialPardonForm because: Form not signed\n"
    )