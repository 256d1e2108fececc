"""Shared fixtures for fielddefs tests."""

from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from fielddefs import FieldDefsSettings, Schema, global_defaults, reset_settings


@dataclass
class MyModel:
    """A subject type standing in for an ORM model."""

    name: Any = None
    age: Any = None
    calorie_intake: Any = None
    auspicious_fortune: Any = None
    birth_month: Any = None

    # Normally provided by the ORM.
    table_name = "my_models"


def read_zodiac_sign(my_model: MyModel) -> str:
    """Derive a zodiac guess from the birth month."""
    if my_model.birth_month in (1, 2):
        return "possibly Aquarius"
    return "not Aquarius"


def write_zodiac_sign(my_model: MyModel, value_to_write: str) -> None:
    """Store a zodiac guess as a representative birth month."""
    my_model.birth_month = 2 if value_to_write == "possibly Aquarius" else 6


def declare_my_model(schema: Schema) -> None:
    """Declare the reference fields of MyModel."""
    schema.field("name")
    schema.field("age").display_proc(lambda age: f"{age} years old")
    schema.field("calorie_intake").human_name("% Daily value USDA recommended intake")
    schema.field("auspicious_fortune").label("personality_trait")
    (
        schema.field("zodiac_sign")
        .label("personality_trait")
        .reader_proc(read_zodiac_sign)
        .writer_proc(write_zodiac_sign)
    )


@pytest.fixture(autouse=True)
def isolated_global_defaults() -> Generator[None, None, None]:
    """Restore the global default chain after each test."""
    snapshot = global_defaults.snapshot()
    yield
    global_defaults.restore(snapshot)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep cached settings and pyproject discovery out of other tests."""
    for name in ("FIELDDEFS_LOG_LEVEL", "FIELDDEFS_STRICT_PROVIDERS", "FIELDDEFS_PLUGINS", "FIELDDEFS_STRICT_PLUGINS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> FieldDefsSettings:
    """Return default settings."""
    return FieldDefsSettings()


@pytest.fixture
def field_defs(settings: FieldDefsSettings) -> Schema:
    """Return the reference schema for MyModel."""
    return Schema.construct(MyModel, declare_my_model, settings=settings)


@pytest.fixture
def model_me() -> MyModel:
    """Return a fully populated MyModel."""
    return MyModel(
        name="Jacob",
        age=24,
        calorie_intake=3000,
        birth_month=10,
        auspicious_fortune="Seek truth and justice in better abstractions",
    )


@pytest.fixture
def model_you() -> MyModel:
    """Return a MyModel born in January."""
    return MyModel(
        name="Unknown",
        age=range(5, 201),
        calorie_intake=range(50, 5001),
        birth_month=1,
        auspicious_fortune="Read the test cases and all will be revealed",
    )
