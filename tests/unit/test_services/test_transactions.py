"""Unit tests for transaction building and CSV import."""

import logging
import math

import pytest

from finance_robot.core.exceptions import CSVParseError
from finance_robot.parsers.csv_rows import normalize_row
from finance_robot.parsers.formats import ColumnAliases
from finance_robot.schemas.internal import CanonicalRow
from finance_robot.services.transactions import (
    NO_DESCRIPTION,
    build_manual_transaction,
    build_transaction,
    import_csv,
    looks_like_credit,
    normalize_amount,
)


class TestNormalizeAmount:
    """Test suite for normalize_amount."""

    def test_plain_and_signed_values(self):
        assert normalize_amount("54.32") == 54.32
        assert normalize_amount("-45") == -45.0
        assert normalize_amount("+7.5") == 7.5
        assert normalize_amount(" 12 ") == 12.0

    def test_currency_symbols_and_separators(self):
        assert normalize_amount("$1,234.56") == 1234.56
        assert normalize_amount("-$2,000") == -2000.0

    def test_parentheses_are_negative(self):
        assert normalize_amount("(123.45)") == -123.45
        assert normalize_amount("($1,000.00)") == -1000.0

    @pytest.mark.parametrize("value", ["0.01", "5", "99.99", "1,250.00", "$310.40"])
    def test_parenthesized_value_is_negation(self, value):
        assert normalize_amount(f"({value})") == -normalize_amount(value)

    @pytest.mark.parametrize("raw", ["abc", "", "$", "()", "12.3.4", "nan", "inf", "1_000"])
    def test_malformed_amounts_raise(self, raw):
        with pytest.raises(ValueError, match="Could not parse amount"):
            normalize_amount(raw)


class TestLooksLikeCredit:
    """Test suite for credit inference."""

    @pytest.mark.parametrize(
        "name",
        [
            "PAYMENT THANK YOU",
            "Statement credit",
            "Refund - order 1234",
            "RETURNED ITEM",
            "Amazon return",
        ],
    )
    def test_credit_keywords_in_name(self, name):
        assert looks_like_credit(name, None) is True

    def test_bank_category_payment_or_credit(self):
        assert looks_like_credit("AUTOPAY", "Payments and Credits") is True
        assert looks_like_credit("Cashback", "Awards and Rebate Credits") is True

    def test_plain_purchase_is_debit(self):
        assert looks_like_credit("Whole Foods Market", "Supermarkets") is False
        assert looks_like_credit("", None) is False


class TestBuildTransaction:
    """Test suite for build_transaction."""

    def test_whole_foods_import_is_grocery_expense(self):
        row = normalize_row(
            {"date": "2024-01-05", "Description": "Whole Foods Market", "Amount": "54.32"}
        )

        txn = build_transaction(row)

        assert txn.amount == -54.32
        assert txn.category == "Groceries"
        assert txn.date == "2024-01-05"
        assert txn.name == "Whole Foods Market"

    def test_payment_import_is_income(self):
        row = normalize_row(
            {"Date": "2024-02-01", "Description": "PAYMENT THANK YOU", "Amount (USD)": "200.00"}
        )

        txn = build_transaction(row)

        assert txn.amount == 200.0
        assert txn.category == "Income"

    def test_bank_category_takes_precedence(self):
        row = CanonicalRow(
            date="2024-02-01",
            raw_name="PAYMENT THANK YOU",
            raw_amount="-200.00",
            bank_category="  Payments and Credits ",
        )

        txn = build_transaction(row)

        assert txn.amount == 200.0
        assert txn.category == "Payments and Credits"

    def test_negative_source_amount_stays_expense_without_credit_cue(self):
        row = CanonicalRow(date="2024-02-02", raw_name="Netflix.com", raw_amount="-15.49")

        txn = build_transaction(row)

        assert txn.amount == -15.49
        assert txn.category == "Subscriptions"

    def test_parenthesized_refund_becomes_positive(self):
        row = CanonicalRow(date="2024-02-03", raw_name="AMAZON RETURN", raw_amount="(15.99)")

        assert build_transaction(row).amount == 15.99

    def test_empty_name_uses_placeholder(self):
        row = CanonicalRow(date="2024-02-04", raw_name="   ", raw_amount="10")

        txn = build_transaction(row)

        assert txn.name == NO_DESCRIPTION
        assert txn.category == "Uncategorized"
        assert txn.amount == -10.0

    def test_empty_name_keeps_bank_category(self):
        row = CanonicalRow(date="2024-02-04", raw_amount="10", bank_category="Travel")

        assert build_transaction(row).category == "Travel"

    def test_zero_amount_is_positive_zero(self):
        row = CanonicalRow(date="2024-02-05", raw_name="Adjustment", raw_amount="0.00")

        txn = build_transaction(row)

        assert txn.amount == 0.0
        assert math.copysign(1.0, txn.amount) == 1.0

    def test_missing_amount_raises(self):
        row = CanonicalRow(date="2024-02-06", raw_name="No amount")

        with pytest.raises(ValueError):
            build_transaction(row)

    def test_ids_are_unique(self):
        row = CanonicalRow(date="2024-02-07", raw_name="Coffee", raw_amount="3")

        ids = {build_transaction(row).id for _ in range(50)}

        assert len(ids) == 50


class TestBuildManualTransaction:
    """Test suite for manual entry."""

    def test_empty_name_is_uncategorized(self):
        txn = build_manual_transaction("2024-03-01", "", -10)

        assert txn.name == "(No description)"
        assert txn.category == "Uncategorized"
        assert txn.amount == -10.0

    def test_sign_is_taken_verbatim(self):
        # "payment" would flip an import to a credit; manual entry keeps the sign.
        txn = build_manual_transaction("2024-03-02", "Car payment", -350.0)

        assert txn.amount == -350.0

    def test_positive_amount_is_income(self):
        assert build_manual_transaction("2024-03-03", "Paycheck", 2500).category == "Income"

    def test_heuristic_applies_to_negative_amount(self):
        txn = build_manual_transaction("2024-03-04", "  Starbucks  ", -6.25)

        assert txn.name == "Starbucks"
        assert txn.category == "Coffee"

    def test_date_is_truncated(self):
        txn = build_manual_transaction("2024-03-05T08:00:00", "Uber", -12)

        assert txn.date == "2024-03-05"
        assert txn.category == "Transport"

    def test_none_name(self):
        assert build_manual_transaction("2024-03-06", None, -1).name == NO_DESCRIPTION


class TestImportCsv:
    """Test suite for import_csv."""

    def test_discover_export(self, discover_csv):
        outcome = import_csv(discover_csv)

        assert outcome.imported == 4
        assert outcome.skipped == 0
        amounts = [txn.amount for txn in outcome.transactions]
        assert amounts == [-54.32, 200.0, -40.10, 15.99]
        categories = [txn.category for txn in outcome.transactions]
        assert categories == ["Supermarkets", "Payments and Credits", "Gasoline", "Merchandise"]

    def test_carriage_return_only_document(self):
        outcome = import_csv(
            "Date,Description,Amount\r2024-01-05,Whole Foods,54.32\r2024-01-06,Shell,10\r"
        )

        assert outcome.imported == 2
        assert [txn.category for txn in outcome.transactions] == ["Groceries", "Gas"]

    def test_sample_is_first_records(self):
        lines = ["Date,Description,Amount"] + [f"2024-01-{d:02d},Coffee,{d}" for d in range(1, 9)]

        outcome = import_csv("\n".join(lines))

        assert outcome.imported == 8
        assert len(outcome.sample) == 5
        assert outcome.sample == outcome.transactions[:5]

    def test_custom_sample_size(self, discover_csv):
        assert len(import_csv(discover_csv, sample_size=2).sample) == 2

    def test_unusable_rows_are_skipped(self):
        text = (
            "Date,Description,Amount\n"
            "2024-01-05,Rent,1500\n"
            ",Mystery,\n"
            "2024-01-06,Pizza,18\n"
        )

        outcome = import_csv(text)

        assert outcome.imported == 2
        assert outcome.skipped == 1
        assert [txn.name for txn in outcome.transactions] == ["Rent", "Pizza"]

    def test_malformed_amount_rows_are_skipped(self, caplog):
        text = (
            "Date,Description,Amount\n"
            "2024-01-05,Lyft,n/a\n"
            "2024-01-06,Lyft,12.00\n"
            "2024-01-07,No amount,\n"
        )

        with caplog.at_level(logging.WARNING, logger="finance_robot.services.transactions"):
            outcome = import_csv(text)

        assert outcome.imported == 1
        assert outcome.skipped == 2
        assert outcome.transactions[0].amount == -12.0
        assert "malformed amount" in caplog.text
        assert "n/a" not in caplog.text

    def test_parse_error_aborts_import(self):
        text = "Date,Description,Amount\n2024-01-05,Rent,1500\n2024-01-06,Broken\n"

        with pytest.raises(CSVParseError):
            import_csv(text)

    def test_custom_aliases(self):
        aliases = ColumnAliases(date=("Posted",), name=("Payee",), amount=("Value",))
        text = "Posted,Payee,Value\n2024-05-01,Comcast,89.99\n"

        outcome = import_csv(text, aliases=aliases)

        assert outcome.transactions[0].category == "Internet"

    def test_categories_never_empty(self, discover_csv):
        text = discover_csv + "01/10/2024,01/10/2024,,12.00,\n"

        outcome = import_csv(text)

        assert outcome.imported == 5
        assert all(txn.category for txn in outcome.transactions)
        assert outcome.transactions[-1].category == "Uncategorized"
