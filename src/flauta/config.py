"""Command-line configuration.

FlautaConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.  The library itself needs no configuration; these
settings shape the ``flauta routes`` output and its logging.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FlautaConfig:
    """Route printer configuration. Immutable after creation.

    Override what you need::

        config = FlautaConfig(field_separator_distance=2, log_level="debug")
    """

    # Table layout
    field_separator_distance: int = 4  # Spaces between columns
    valid_heading: str = "[Valid Routes]"
    invalid_heading: str = "[Invalid Routes]"

    # Logging (debug, info, warning, error, critical)
    log_level: str = "warning"
