"""secid.core — result, error and value types."""

from secid.core.errors import (
    ChecksumFailedError as ChecksumFailedError,
)
from secid.core.errors import (
    ConversionError as ConversionError,
)
from secid.core.errors import (
    ConversionFailure as ConversionFailure,
)
from secid.core.errors import (
    IdentifierError as IdentifierError,
)
from secid.core.errors import (
    TooShortError as TooShortError,
)
from secid.core.result import (
    Err as Err,
)
from secid.core.result import (
    Ok as Ok,
)
from secid.core.result import (
    sequence as sequence,
)
from secid.core.result import (
    unwrap as unwrap,
)
from secid.core.types import (
    CanonicalCode as CanonicalCode,
)
from secid.core.types import (
    Scheme as Scheme,
)
from secid.core.types import (
    Verification as Verification,
)
