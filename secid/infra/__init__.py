"""secid.infra — validation policy and observers."""

from secid.infra.config import (
    DEFAULT_POLICY as DEFAULT_POLICY,
)
from secid.infra.config import (
    ValidationPolicy as ValidationPolicy,
)
from secid.infra.observer import (
    LoggingObserver as LoggingObserver,
)
from secid.infra.observer import (
    NullObserver as NullObserver,
)
from secid.infra.observer import (
    ValidationObserver as ValidationObserver,
)
