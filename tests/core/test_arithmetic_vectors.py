"""Fixed limb vectors from tests/vectors/arithmetic_vectors.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.core import Natural

VECTORS_PATH = Path(__file__).resolve().parents[1] / "vectors" / "arithmetic_vectors.yaml"


def _load() -> dict[str, Any]:
    return yaml.safe_load(VECTORS_PATH.read_text(encoding="utf-8"))


VECTORS = _load()


def _ids(section: str) -> list[str]:
    return [case.get("name", str(case.get("n"))) for case in VECTORS[section]]


@pytest.mark.parametrize("case", VECTORS["add"], ids=_ids("add"))
def test_add_vector(case: dict[str, Any]) -> None:
    a, b = Natural(case["a"]), Natural(case["b"])
    expected = Natural(case["expected"])
    assert a + b == expected
    assert b + a == expected


@pytest.mark.parametrize("case", VECTORS["multiply"], ids=_ids("multiply"))
def test_multiply_vector(case: dict[str, Any]) -> None:
    a, b = Natural(case["a"]), Natural(case["b"])
    expected = Natural(case["expected"])
    assert a * b == expected
    assert b * a == expected


@pytest.mark.parametrize("case", VECTORS["divide"], ids=_ids("divide"))
def test_divide_vector(case: dict[str, Any]) -> None:
    quotient, remainder = Natural(case["p"]).divmod(Natural(case["q"]))
    assert quotient.limbs == tuple(case["quotient"])
    assert remainder.limbs == tuple(case["remainder"])


@pytest.mark.parametrize("case", VECTORS["factorial"], ids=_ids("factorial"))
def test_factorial_vector(case: dict[str, Any]) -> None:
    acc = Natural.one()
    k = Natural.one()
    bound = Natural.from_u64(case["n"])
    while k <= bound:
        acc = acc * k
        k.inc()
    assert str(acc) == case["expected"]
