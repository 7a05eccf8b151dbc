"""Account and transaction generators for sample ledgers."""

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from ledger_export.generators.base import BaseGenerator
from ledger_export.models import DEFAULT_CURRENCY_CODE, Account, AccountType, Money, Transaction


class AccountGenerator(BaseGenerator):
    """Generate sample ledger accounts."""

    ACCOUNT_NAMES = {
        AccountType.CASH: ["Wallet", "Petty Cash", "Cash in Hand"],
        AccountType.BANK: ["Checking Account", "Savings Account", "Joint Account"],
        AccountType.CREDIT: ["Credit Card", "Store Card"],
        AccountType.EXPENSE: ["Groceries", "Rent", "Utilities", "Dining", "Transport"],
        AccountType.INCOME: ["Salary", "Interest", "Dividends"],
        AccountType.LIABILITY: ["Mortgage", "Car Loan"],
    }

    def generate(
        self,
        name: str | None = None,
        account_type: AccountType | None = None,
        currency: str = DEFAULT_CURRENCY_CODE,
        parent_uid: str | None = None,
    ) -> Account:
        """Generate a single account.

        Parameters
        ----------
        name : str | None
            Account name. Picked from typical names of the type when omitted.
        account_type : AccountType | None
            Account type. Random among types with sample names when omitted.
        currency : str
            Account currency.
        parent_uid : str | None
            UID of the parent account.

        Returns
        -------
        Account
            Generated account.
        """
        if account_type is None:
            account_type = random.choice(list(self.ACCOUNT_NAMES))
        if name is None:
            candidates = self.ACCOUNT_NAMES.get(account_type)
            name = random.choice(candidates) if candidates else self.fake.word().title()

        account = Account(name, currency, account_type)
        account.parent_uid = parent_uid
        account.set_color_code(self.fake.hex_color())
        return account


class TransactionGenerator(BaseGenerator):
    """Generate sample ledger transactions."""

    DEBIT_RATE = 0.7
    MAX_AMOUNT = 5000

    def generate(
        self,
        account_uid: str | None = None,
        double_entry_account_uid: str | None = None,
        currency: str = DEFAULT_CURRENCY_CODE,
    ) -> Transaction:
        """Generate a single transaction.

        Parameters
        ----------
        account_uid : str | None
            Account the transaction is recorded in.
        double_entry_account_uid : str | None
            Other leg of a transfer.
        currency : str
            Currency of the amount.

        Returns
        -------
        Transaction
            Generated transaction.
        """
        # Amount based on Pareto distribution
        value = min(random.paretovariate(1.5) * 20, self.MAX_AMOUNT)
        amount = Decimal(str(round(value, 2))).quantize(Decimal("0.01"))
        if random.random() < self.DEBIT_RATE:
            amount = -amount

        description = self.fake.sentence(nb_words=4) if random.random() < 0.5 else ""

        return Transaction(
            name=self.fake.company(),
            amount=Money(amount, currency),
            time=datetime.now() - timedelta(
                days=random.randint(0, 90),
                hours=random.randint(0, 23),
                minutes=random.randint(0, 59),
            ),
            description=description,
            account_uid=account_uid,
            double_entry_account_uid=double_entry_account_uid,
        )

    def generate_batch(
        self,
        count: int,
        account_uid: str | None = None,
        currency: str = DEFAULT_CURRENCY_CODE,
    ) -> Iterator[Transaction]:
        """Generate ``count`` transactions for one account."""
        for _ in range(count):
            yield self.generate(account_uid=account_uid, currency=currency)
