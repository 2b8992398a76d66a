"""secid — extract and validate FIGI, ISIN and CUSIP security identifiers."""

from secid.checksum import (
    cusip_check_digit as cusip_check_digit,
)
from secid.checksum import (
    is_valid_luhn as is_valid_luhn,
)
from secid.checksum import (
    is_valid_modulus10_double_add_double as is_valid_modulus10_double_add_double,
)
from secid.checksum import (
    luhn_check_digit as luhn_check_digit,
)
from secid.checksum import (
    to_numeric as to_numeric,
)
from secid.core import (
    CanonicalCode as CanonicalCode,
)
from secid.core import (
    ChecksumFailedError as ChecksumFailedError,
)
from secid.core import (
    ConversionError as ConversionError,
)
from secid.core import (
    ConversionFailure as ConversionFailure,
)
from secid.core import (
    Err as Err,
)
from secid.core import (
    IdentifierError as IdentifierError,
)
from secid.core import (
    Ok as Ok,
)
from secid.core import (
    Scheme as Scheme,
)
from secid.core import (
    TooShortError as TooShortError,
)
from secid.core import (
    Verification as Verification,
)
from secid.core import (
    sequence as sequence,
)
from secid.core import (
    unwrap as unwrap,
)
from secid.identifiers import (
    validate as validate,
)
from secid.identifiers import (
    validate_all as validate_all,
)
from secid.identifiers import (
    validate_cusip as validate_cusip,
)
from secid.identifiers import (
    validate_figi as validate_figi,
)
from secid.identifiers import (
    validate_isin as validate_isin,
)
from secid.infra import (
    DEFAULT_POLICY as DEFAULT_POLICY,
)
from secid.infra import (
    LoggingObserver as LoggingObserver,
)
from secid.infra import (
    NullObserver as NullObserver,
)
from secid.infra import (
    ValidationObserver as ValidationObserver,
)
from secid.infra import (
    ValidationPolicy as ValidationPolicy,
)
