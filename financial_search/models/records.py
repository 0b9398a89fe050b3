"""Record models for accounts, transactions and customers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"


class TransactionType(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"


class RecordModel(BaseModel):
    """Base for records; accepts camelCase keys and snake_case names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Account(RecordModel):
    """A bank account."""

    id: str = Field(..., description="Account identifier")
    account_number: str = Field(..., alias="accountNumber", description="Account number")
    account_holder: str = Field(..., alias="accountHolder", description="Account holder name")
    balance: float = Field(..., description="Signed balance")
    type: AccountType = Field(..., description="Account category")


class Transaction(RecordModel):
    """A posted transaction."""

    id: str = Field(..., description="Transaction identifier")
    amount: float = Field(..., description="Signed amount")
    date: str = Field(..., description="ISO-8601 date or date-time")
    description: str = Field(..., description="Free-text description")
    account_id: str = Field(..., alias="accountId", description="Owning account identifier")
    type: TransactionType = Field(..., description="Debit or credit")


class Customer(RecordModel):
    """A customer profile."""

    id: str = Field(..., description="Customer record identifier")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    phone: str = Field(..., description="Phone number")
    customer_id: str = Field(..., alias="customerId", description="Customer-facing identifier")
