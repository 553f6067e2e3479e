"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (поставляются вместе с пакетом, каталог schema/):
- tiling_config.json : параметры построения разбиения
- data_point.json    : запись точки данных {"x", "y"}
- tile_set.json      : экспорт построенного разбиения
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from hypertiling.core.domain.config import TilingConfig

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'tile_set')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s", schema_name)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class TilingConfigValidator(ContractValidator):
    def __init__(self):
        super().__init__("tiling_config")


class DataPointValidator(ContractValidator):
    def __init__(self):
        super().__init__("data_point")


class TileSetValidator(ContractValidator):
    def __init__(self):
        super().__init__("tile_set")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_tiling_config(data: Dict[str, Any]) -> None:
    TilingConfigValidator().validate(data)


def validate_point_record(data: Dict[str, Any]) -> None:
    DataPointValidator().validate(data)


def validate_tile_set(data: Dict[str, Any]) -> None:
    TileSetValidator().validate(data)


def load_tiling_config(document: Dict[str, Any]) -> TilingConfig:
    """
    Построение TilingConfig из внешнего документа (dict из JSON).

    Сначала документ проверяется по контракту tiling_config, затем
    строится pydantic модель. Гиперболическое условие 1/p + 1/q < 1/2
    проверяется позже, в build_tiling.

    Raises:
        ValidationError: Если документ не соответствует схеме
    """
    validate_tiling_config(document)
    config = TilingConfig(**document)
    logger.debug("Loaded tiling config %s", config)
    return config
