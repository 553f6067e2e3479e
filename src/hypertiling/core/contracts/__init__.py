"""
Contract Validation Module

Модуль для валидации JSON контрактов hypertiling.
"""

from .validators import (
    ContractValidator,
    DataPointValidator,
    SchemaLoader,
    TileSetValidator,
    TilingConfigValidator,
    load_tiling_config,
    validate_point_record,
    validate_tile_set,
    validate_tiling_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TilingConfigValidator",
    "DataPointValidator",
    "TileSetValidator",
    # Functions
    "load_tiling_config",
    "validate_tiling_config",
    "validate_point_record",
    "validate_tile_set",
]
