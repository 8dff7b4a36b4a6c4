import pytest

from pastimes.accounts import CheckingAccount, SavingsAccount
from pastimes.bank_demo import (
    format_account,
    format_employee,
    format_person,
    main,
    smaller,
    withdraw_and_report,
)
from pastimes.people import Holder, Weekday
from pastimes.staff import Manager


@pytest.fixture
def holder():
    return Holder("CPF-0000001", "Fulano de Tal", "password")


def test_smaller_numbers():
    assert smaller(42, 105) == 42
    assert smaller(29.7, 7.5) == 7.5


def test_smaller_accounts(holder):
    poor = CheckingAccount("ACC-1", holder)
    rich = SavingsAccount("ACC-2", holder)
    rich.deposit(10)
    assert smaller(rich, poor) is poor
    assert smaller(poor, rich) is poor


def test_withdraw_insufficient_report(holder):
    account = CheckingAccount("ACC-1", holder)
    account.deposit(1000)
    assert withdraw_and_report(account, 1000000) == "Erro ao sacar: Saldo insuficiente!"
    assert account.balance == 1000


def test_withdraw_invalid_report(holder):
    account = SavingsAccount("ACC-2", holder)
    assert withdraw_and_report(account, -100) == "Erro ao sacar: Valor invalido!"


def test_withdraw_success_report(holder):
    account = SavingsAccount("ACC-2", holder)
    account.deposit(1000)
    report = withdraw_and_report(account, 100)
    assert report.startswith("Saque realizado; novo saldo: R$ ")
    assert float(report.rsplit(" ", 1)[1]) == pytest.approx(account.balance)


def test_format_account(holder):
    account = CheckingAccount("ACC-1", holder)
    assert format_account(account) == (
        "conta: { numero: ACC-1, nome: Fulano de Tal, saldo: R$ 0.00 }"
    )


def test_format_person(holder):
    assert format_person(holder) == "pessoa: { nome: Fulano de Tal, cpf: CPF-0000001 }"


def test_format_employee():
    manager = Manager("CPF-0000003", "Gerente da Silva", 10000, Weekday.TUESDAY, "password")
    text = format_employee(manager)
    assert text.startswith("funcionario: { nome: Gerente da Silva, cpf: CPF-0000003, ")
    assert f"bonus: R$ {manager.bonus():.2f} }}" in text


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Erro ao sacar: Saldo insuficiente!" in out
    assert "Erro ao sacar: Valor invalido!" in out
    assert "Domingo: Domingo" in out
    assert "pessoa: { nome: Pafuncia da Silva, cpf: CPF-0000002 }" in out