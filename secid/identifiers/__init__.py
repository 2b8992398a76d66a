"""secid.identifiers — FIGI, ISIN and CUSIP validators."""

from secid.identifiers.cusip import (
    validate_cusip as validate_cusip,
)
from secid.identifiers.dispatch import (
    validate as validate,
)
from secid.identifiers.dispatch import (
    validate_all as validate_all,
)
from secid.identifiers.figi import (
    validate_figi as validate_figi,
)
from secid.identifiers.isin import (
    validate_isin as validate_isin,
)
