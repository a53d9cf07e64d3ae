"""Phone number normalisation for Tanzanian MSISDNs"""

from temboplus.domain.exceptions import ValidationError

COUNTRY_PREFIX = "255"


def format_msisdn(phone_number: str) -> str:
    """Normalise ``+255...``, ``0715...`` or ``715...`` to ``255715...``"""
    if phone_number.startswith("+"):
        phone_number = phone_number[1:]
    if phone_number.startswith("0"):
        phone_number = phone_number[1:]

    # Local subscriber number without country code
    if len(phone_number) == 9 and phone_number[0] in "67":
        phone_number = COUNTRY_PREFIX + phone_number

    return phone_number


def validate_msisdn(msisdn: str) -> None:
    if len(msisdn) < 10 or len(msisdn) > 15:
        raise ValidationError("msisdn", f"invalid MSISDN length: {msisdn}")
    if not msisdn.startswith(COUNTRY_PREFIX):
        raise ValidationError(
            "msisdn", f"MSISDN should start with country code {COUNTRY_PREFIX} for Tanzania: {msisdn}"
        )
