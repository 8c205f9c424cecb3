import re

CARD_ERROR = "Enter a valid card number (16–19 digits)"
EXPIRY_ERROR = "Invalid expiry date"
CVC_ERROR = "Invalid CVC"


def digits_only(value: str | None) -> str:
	return re.sub(r"\D", "", value or "")


def format_card_number(value: str) -> str:
	digits = digits_only(value)[:19]
	return " ".join(digits[i:i + 4] for i in range(0, len(digits), 4))


def format_expiry(value: str) -> str:
	digits = digits_only(value)[:4]
	if len(digits) < 3:
		return digits
	return f"{digits[:2]}/{digits[2:]}"


def validate_expiry(value: str) -> bool:
	parts = (value or "").split("/")
	if len(parts) != 2:
		return False
	m, y = parts
	if len(m) != 2 or len(y) != 2 or not m.isdigit() or not y.isdigit():
		return False
	return 1 <= int(m) <= 12


def validate_cvc(value: str) -> bool:
	return re.fullmatch(r"[0-9]{3,4}", value or "") is not None


def validate_payment(card_number: str, expiry: str, cvc: str) -> dict:
	"""Return field -> message for every invalid field; empty when the card is acceptable.

	Input is normalised the way the payment form formats it while typing, so
	"4242424242424242" and "4242 4242 4242 4242" are equivalent, as are
	"1228" and "12/28".
	"""
	errors = {}
	card_digits = digits_only(card_number)
	if len(card_digits) < 16 or len(card_digits) > 19:
		errors["card"] = CARD_ERROR
	if not validate_expiry(format_expiry(expiry)):
		errors["expiry"] = EXPIRY_ERROR
	if not validate_cvc((cvc or "").strip()):
		errors["cvc"] = CVC_ERROR
	return errors
