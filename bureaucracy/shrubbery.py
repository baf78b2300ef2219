"""The shrubbery creation form, which plants an ASCII tree in a file."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from bureaucracy.forms import Form

_CROWN = r'''
                              &&& &&  & &&
                          && &\/&\|& ()|/ @, &&
                          &\/(/&/&||/& /_/)_&/_&
                       &() &\/&|()|/&\/ '%" & ()
                      &_\_&&_\ |& |&&/&__%_/_& &&
                    &&   && & &| &| /& & % ()& /&&
                     ()&_---()&\&\|&&-&&--%---()~
                        &&     \|||
                                  |||
                                  |||
                                  |||
                            , -=-~  .-^- _
                         .-""""""""""""""-.
                        /`-._          _.-'\
                       /     `""""""""`     \
                      ;                     ;
                      |    _--_   _--_      |
                      ;   /    \ /    \     ;
                       \  \o_o / \o_o /    /
                        `"-.__|   |__.-"`
                             |   |
                             |   |
                             |   |
                             |   |
                             |   |
                       _____/     \_____
'''[1:]


def _skirt() -> list[str]:
    lines = [
        " " * indent + "/" + " " * (18 + 2 * (22 - indent)) + "\\"
        for indent in range(22, 0, -1)
    ]
    lines.append("/" + "_" * 62 + "\\")
    return lines


_ROOTS = [" " * 25 + "|" * 21] * 8

SHRUBBERY_ART = _CROWN + "\n".join(_skirt() + _ROOTS) + "\n"


class ShrubberyCreationForm(Form):
    """Writes an ASCII tree to ``<target>_shrubbery`` when executed."""

    def __init__(
        self,
        target: str,
        directory: str | os.PathLike[str] | None = None,
    ) -> None:
        super().__init__("ShrubberyCreationForm", 145, 137)
        self._target = target
        self._directory = Path(directory) if directory is not None else None

    @property
    def target(self) -> str:
        return self._target

    @property
    def output_path(self) -> Path:
        """Where the tree is written."""
        filename = f"{self._target}_shrubbery"
        if self._directory is None:
            return Path(filename)
        return self._directory / filename

    def _perform(self) -> None:
        path = self.output_path
        try:
            with path.open("w", encoding="utf-8") as out:
                out.write(SHRUBBERY_ART)
        except OSError:
            print(f"Error: could not open file {path}", file=sys.stderr)