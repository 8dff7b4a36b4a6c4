"""Demonstration of the bank model: accounts, holders and staff."""

from __future__ import annotations

import argparse
from typing import TypeVar

from .accounts import (
    Account,
    CheckingAccount,
    InsufficientFundsError,
    InvalidAmountError,
    SavingsAccount,
)
from .people import Cpf, Holder, Person, Weekday
from .staff import Cashier, Employee, Manager

T = TypeVar("T")


def withdraw_and_report(account: Account, amount: float) -> str:
    """Withdraw from the account and describe the outcome."""
    try:
        balance = account.withdraw(amount)
    except InsufficientFundsError:
        return "Erro ao sacar: Saldo insuficiente!"
    except InvalidAmountError:
        return "Erro ao sacar: Valor invalido!"
    return f"Saque realizado; novo saldo: R$ {balance:g}"


def format_account(account: Account) -> str:
    return (
        f"conta: {{ numero: {account.number}, nome: {account.holder.name}, "
        f"saldo: R$ {account.balance:.2f} }}"
    )


def format_employee(employee: Employee) -> str:
    return (
        f"funcionario: {{ nome: {employee.name}, cpf: {employee.cpf}, "
        f"salario: R$ {employee.salary:.2f}, bonus: R$ {employee.bonus():.2f} }}"
    )


def format_person(person: Person[Cpf]) -> str:
    return f"pessoa: {{ nome: {person.name}, cpf: {person.document.value} }}"


def smaller(a: T, b: T) -> T:
    """Return a if it is less than b, otherwise b."""
    return a if a < b else b  # type: ignore[operator]


def main(argv: list[str] | None = None) -> int:
    """Run the bank demonstration and print its results."""
    parser = argparse.ArgumentParser(
        prog="bank-demo", description="Demonstrate accounts, holders and staff."
    )
    parser.parse_args(argv)

    c1 = CheckingAccount("ACC-1", Holder("CPF-0000001", "Fulano de Tal", "password"))
    c2 = SavingsAccount("ACC-2", Holder("CPF-0000002", "Pafuncia da Silva", "secret"))

    c1.deposit(1000)
    c2 += 1000
    c1.transfer(c2, 100)

    print(withdraw_and_report(c1, 1000000))
    print(withdraw_and_report(c2, -100))

    print(format_account(c1))
    print(format_account(c2))
    print(f"Total de contas: {Account.total_accounts()}")

    f1 = Manager("CPF-0000003", "Gerente da Silva", 10000, Weekday.TUESDAY, "placeholder")
    f2 = Cashier("CPF-0000004", "Caixa Pereira", 5000, Weekday.FRIDAY, "token")

    print(format_employee(f1))
    print(format_employee(f2))

    print(int(c1.holder.authenticate("password")))
    print(int(c2.holder.authenticate("secret")))
    print(int(f1.authenticate("placeholder")))
    print(int(f2.authenticate("token")))

    monday = chr(Weekday.MONDAY.value)
    sunday = Weekday.SUNDAY
    print(f"Domingo: {sunday.label()}, Segunda: {monday}")

    print(format_person(c1.holder))
    print(format_person(c2.holder))
    print(format_person(f1))
    print(format_person(f2))

    print(format_account(smaller(c1, c2)))
    print(smaller(42, 105))
    print(f"{smaller(7.5, 29.7):g}")
    return 0