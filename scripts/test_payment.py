from healthconnect.services.payment import (
	CARD_ERROR, CVC_ERROR, EXPIRY_ERROR,
	format_card_number, format_expiry, validate_cvc, validate_expiry, validate_payment,
)


def test_format_card_number_groups_by_four():
	assert format_card_number("4242424242424242") == "4242 4242 4242 4242"
	assert format_card_number("4242-4242 42") == "4242 4242 42"
	assert format_card_number("1" * 25) == "1111 1111 1111 1111 111"


def test_format_expiry():
	assert format_expiry("1") == "1"
	assert format_expiry("12") == "12"
	assert format_expiry("122") == "12/2"
	assert format_expiry("12/285") == "12/28"


def test_validate_expiry_checks_shape_and_month():
	assert validate_expiry("01/30")
	assert validate_expiry("12/20")
	assert not validate_expiry("13/30")
	assert not validate_expiry("00/30")
	assert not validate_expiry("1/30")
	assert not validate_expiry("1230")


def test_validate_cvc():
	assert validate_cvc("123")
	assert validate_cvc("1234")
	assert not validate_cvc("12")
	assert not validate_cvc("12a")


def test_validate_payment_reports_each_field():
	assert validate_payment("4242 4242 4242 4242", "1228", "123") == {}
	errors = validate_payment("4242", "99/99", "1")
	assert errors == {"card": CARD_ERROR, "expiry": EXPIRY_ERROR, "cvc": CVC_ERROR}
	assert "card" in validate_payment("1" * 20, "12/28", "123")
