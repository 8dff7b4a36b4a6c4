"""Bank employees and their bonuses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .people import Authenticator, Cpf, Person, Weekday


class Employee(Person[Cpf], Authenticator, ABC):
    """An employee paid on a given weekday; the role sets the bonus."""

    def __init__(
        self, cpf: str, name: str, salary: float, payday: Weekday, password: str
    ) -> None:
        Person.__init__(self, Cpf(cpf), name)
        Authenticator.__init__(self, password)
        self._salary = salary
        self.payday = payday

    @property
    def cpf(self) -> str:
        return self.document.value

    @property
    def salary(self) -> float:
        return self._salary

    @abstractmethod
    def bonus(self) -> float:
        """Bonus paid on top of the salary."""


class Manager(Employee):
    """Manager: bonus of 5% of the salary."""

    def bonus(self) -> float:
        return self.salary * 0.05


class Cashier(Employee):
    """Cashier: bonus of 3% of the salary."""

    def bonus(self) -> float:
        return self.salary * 0.03