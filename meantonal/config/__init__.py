from .config import (  # noqa: F401
    TuningSettings,
    context_from_config,
    load_config,
    tuning_map_from_config,
    validate_config,
)
