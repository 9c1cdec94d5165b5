"""Tests for the command-line demo driver."""
import logging

import pytest

import run_order


def test_default_run_orders_three_products(capsys):
    """Test the default run orders Pizza, Spaghetti and Burger."""
    logging.info("\n=== TEST: Default run ===")

    assert run_order.main([]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Pizza ordered! Price: 350",
        "Spaghetti ordered! Price: 300",
        "Burger ordered! Price: 280",
    ]

    logging.info("✓ All three orders printed")


def test_failures_are_printed_and_exit_code_stays_zero(capsys):
    """Test failed orders are printed and do not change the exit code."""
    logging.info("\n=== TEST: Failures printed, exit code 0 ===")

    assert run_order.main(["--balance", "300"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Error: Not enough money to order Pizza",
        "Error: Not enough money to order Spaghetti",
        "Burger ordered! Price: 280",
    ]

    logging.info("✓ Failures printed per order")


def test_products_and_debit_flags(capsys):
    """Test --product and --debit together."""
    logging.info("\n=== TEST: --product and --debit ===")

    assert run_order.main(["--balance", "700", "--debit", "--product", "Pizza", "--product", "Pizza"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["Pizza ordered! Price: 350", "Error: Not enough money to order Pizza"]

    logging.info("✓ Second pizza refused after debit")


def test_unknown_product_is_rejected():
    """Test argparse rejects a product outside the enumeration."""
    logging.info("\n=== TEST: Unknown product on the command line ===")

    with pytest.raises(SystemExit) as exc_info:
        run_order.main(["--product", "Sushi"])
    assert exc_info.value.code == 2

    logging.info("✓ Unknown product rejected")
