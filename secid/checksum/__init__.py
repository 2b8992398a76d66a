"""secid.checksum — check digit algorithms and numeric expansion."""

from secid.checksum.conversion import (
    expand_digits as expand_digits,
)
from secid.checksum.conversion import (
    to_numeric as to_numeric,
)
from secid.checksum.double_add_double import (
    cusip_check_digit as cusip_check_digit,
)
from secid.checksum.double_add_double import (
    is_valid_modulus10_double_add_double as is_valid_modulus10_double_add_double,
)
from secid.checksum.luhn import (
    is_valid_luhn as is_valid_luhn,
)
from secid.checksum.luhn import (
    luhn_check_digit as luhn_check_digit,
)
