"""People, documents and credentials shared by the bank model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

CPF_LENGTH = 11
MIN_NAME_LENGTH = 6

_LABELS = (
    "Domingo",
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
)


class Weekday(Enum):
    """Days of the week, starting on Sunday at 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def label(self) -> str:
        """Name of the day as shown to users."""
        return _LABELS[self.value]


class Authenticator:
    """Something that can be authenticated with a password."""

    def __init__(self, password: str) -> None:
        self._password = password

    def authenticate(self, password: str) -> bool:
        return self._password == password


@dataclass(frozen=True)
class Cpf:
    """Individual taxpayer document; must have exactly 11 characters."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != CPF_LENGTH:
            raise ValueError("CPF de tamanho inválido!")

    def __str__(self) -> str:
        return self.value


D = TypeVar("D")


class Person(Generic[D]):
    """A named person identified by a document."""

    def __init__(self, document: D, name: str) -> None:
        if len(name) < MIN_NAME_LENGTH:
            raise ValueError("Nome muito curto!")
        self.document = document
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class Holder(Person[Cpf], Authenticator):
    """Account holder identified by a CPF."""

    def __init__(self, cpf: str, name: str, password: str) -> None:
        Person.__init__(self, Cpf(cpf), name)
        Authenticator.__init__(self, password)