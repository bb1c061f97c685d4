"""Tests for the menu operations, including the marina walkthrough scenario."""

import logging
from decimal import Decimal

import pytest

from marina.errors import (
    BoatNotFoundError,
    BoatParseError,
    CapacityError,
    InvalidAmountError,
    OverpaymentError,
)
from marina.models import Boat, NoLocation, StorageType
from marina.operations import (
    accept_payment,
    add_boat,
    apply_monthly_charges,
    format_inventory_line,
    list_inventory,
    monthly_charge,
    parse_amount,
    remove_boat,
)
from marina.repository import BoatRepo
from marina.storage import load_boats


def test_walkthrough(data_file):
    repo = BoatRepo()
    load_boats(data_file, repo)

    rows = list(list_inventory(repo))
    assert len(rows) == 1
    assert rows[0].startswith("Eleanor ")
    assert "  28' " in rows[0]
    assert "slip" in rows[0]
    assert "# 26" in rows[0]
    assert rows[0].endswith("Owes $ 500.00")

    add_boat(repo, "Biscuit,20,land,B,0.00\n")
    assert [b.name for b in repo] == ["Biscuit", "Eleanor"]

    apply_monthly_charges(repo)
    eleanor = repo.find_by_name("Eleanor")
    assert eleanor.amount_owed == Decimal("850.00")

    with pytest.raises(OverpaymentError) as excinfo:
        accept_payment(repo, "Eleanor", Decimal("1000.00"))
    assert excinfo.value.balance == Decimal("850.00")
    assert "$850.00" in str(excinfo.value)
    assert eleanor.amount_owed == Decimal("850.00")

    accept_payment(repo, "Eleanor", Decimal("850.00"))
    assert eleanor.amount_owed == Decimal("0.00")

    remove_boat(repo, "Biscuit")
    assert [b.name for b in repo] == ["Eleanor"]


def test_inventory_line_layout(eleanor):
    assert format_inventory_line(eleanor) == (
        "Eleanor                28'     slip   # 26   Owes $ 500.00"
    )


def test_inventory_line_per_location_type(repo):
    add_boat(repo, "Biscuit,20,land,B,0.00")
    add_boat(repo, "Big Brother,24,trailor,6EF7XY,0")
    add_boat(repo, "Sea Breeze,32,storage,14,0")
    add_boat(repo, "Mystery,20,bogus,x,0")
    rows = {b.name: format_inventory_line(b) for b in repo}
    assert "    land      B   Owes" in rows["Biscuit"]
    assert " trailor  6EF7XY   Owes" in rows["Big Brother"]
    assert " storage   # 14   Owes" in rows["Sea Breeze"]
    assert " invalid    Owes" in rows["Mystery"]


def test_inventory_listing_is_lazy_and_restartable(seeded_repo):
    listing = list_inventory(seeded_repo)
    assert len(list(listing)) == 1
    add_boat(seeded_repo, "Biscuit,20,land,B,0.00")
    rows = list(listing)
    assert len(rows) == 2
    assert rows[0].startswith("Biscuit")
    assert len(listing) == 2


def test_add_rejects_malformed_csv(repo):
    with pytest.raises(BoatParseError):
        add_boat(repo, "Biscuit,twenty,land,B,0.00")
    assert len(repo) == 0


def test_add_when_full_raises_capacity_error():
    repo = BoatRepo(capacity=1)
    add_boat(repo, "Eleanor,28,slip,26,500.00")
    with pytest.raises(CapacityError) as excinfo:
        add_boat(repo, "Biscuit,20,land,B,0.00")
    assert str(excinfo.value) == "Boat limit reached!"
    assert len(repo) == 1


def test_add_allows_duplicate_names(seeded_repo, eleanor):
    add_boat(seeded_repo, "ELEANOR,30,storage,3,1.00")
    assert len(seeded_repo) == 2
    assert seeded_repo.find_by_name("eleanor") is eleanor


def test_remove_missing_boat(seeded_repo, eleanor):
    with pytest.raises(BoatNotFoundError) as excinfo:
        remove_boat(seeded_repo, "Biscuit")
    assert str(excinfo.value) == "No boat with that name"
    assert seeded_repo.boats() == [eleanor]


def test_payment_to_unknown_boat(seeded_repo):
    with pytest.raises(BoatNotFoundError):
        accept_payment(seeded_repo, "Biscuit", Decimal("1"))


def test_payment_is_case_insensitive(seeded_repo, eleanor):
    accept_payment(seeded_repo, "eleanor", Decimal("100.25"))
    assert eleanor.amount_owed == Decimal("399.75")


def test_negative_payment_is_rejected(seeded_repo, eleanor):
    with pytest.raises(InvalidAmountError):
        accept_payment(seeded_repo, "Eleanor", Decimal("-5"))
    assert eleanor.amount_owed == Decimal("500.00")


@pytest.mark.parametrize("text", ["", "abc", "-10", "inf"])
def test_parse_amount_rejects(text):
    with pytest.raises(InvalidAmountError):
        parse_amount(text)


def test_parse_amount_accepts_decimal_text():
    assert parse_amount(" 850.00\n") == Decimal("850.00")


@pytest.mark.parametrize(
    "csv, charge",
    [
        ("A,28,slip,26,0", Decimal("350.00")),
        ("B,20,land,B,0", Decimal("280.00")),
        ("C,24,trailor,T1,0", Decimal("600.00")),
        ("D,30,storage,9,0", Decimal("336.00")),
    ],
)
def test_monthly_charge_per_type(repo, csv, charge):
    boat = add_boat(repo, csv)
    before = boat.amount_owed
    apply_monthly_charges(repo)
    assert boat.amount_owed == before + charge


def test_invalid_boats_are_not_billed(repo, caplog):
    mystery = add_boat(repo, "Mystery,20,bogus,x,10.00")
    add_boat(repo, "Eleanor,28,slip,26,500.00")
    with caplog.at_level(logging.WARNING, logger="marina.operations"):
        skipped = apply_monthly_charges(repo)
    assert skipped == [mystery]
    assert mystery.amount_owed == Decimal("10.00")
    assert repo.find_by_name("Eleanor").amount_owed == Decimal("850.00")
    assert "not billed" in caplog.text


def test_monthly_charge_is_zero_for_invalid():
    boat = Boat("Mystery", Decimal("20"), StorageType.INVALID, NoLocation())
    assert monthly_charge(boat) == Decimal("0.00")


def test_zero_payment_is_a_no_op(seeded_repo, eleanor):
    accept_payment(seeded_repo, "Eleanor", parse_amount("0"))
    assert eleanor.amount_owed == Decimal("500.00")


def test_parse_amount_rounds_to_cents():
    assert parse_amount("10.005") == Decimal("10.01")


def test_fractional_length_bill_can_be_paid_as_shown(repo):
    skiff = add_boat(repo, "Skiff,10.35,slip,1,0")
    apply_monthly_charges(repo)
    assert skiff.amount_owed == Decimal("129.38")
    shown = format_inventory_line(skiff).rsplit("$", 1)[1].strip()
    assert shown == "129.38"

    accept_payment(repo, "Skiff", parse_amount(shown))
    assert skiff.amount_owed == Decimal("0.00")


def test_sub_cent_balance_is_rounded_on_entry(repo):
    boat = add_boat(repo, "Skiff,20,slip,1,128.125")
    assert boat.amount_owed == Decimal("128.13")
    accept_payment(repo, "Skiff", Decimal("128.13"))
    assert boat.amount_owed == Decimal("0.00")


def test_payment_against_unrounded_balance_clears_it(repo):
    boat = Boat("Skiff", Decimal("20"), StorageType.INVALID, NoLocation(), Decimal("128.125"))
    repo.insert(boat)
    accept_payment(repo, "Skiff", Decimal("128.13"))
    assert boat.amount_owed == Decimal("0.00")
