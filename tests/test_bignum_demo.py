from __future__ import annotations

import pytest


def test_factorial_command(capsys) -> None:
    from tools.bignum_demo import main

    assert main(["factorial", "25"]) == 0
    assert capsys.readouterr().out.strip() == "25!: 15511210043330985984000000"


def test_factorial_helper_matches_vector() -> None:
    from src.core import Natural
    from tools.bignum_demo import factorial

    assert str(factorial(Natural.from_u64(20))) == "2432902008176640000"
    assert factorial(Natural.zero()) == 1


def test_triangular_command(capsys) -> None:
    from tools.bignum_demo import main

    assert main(["triangular", "5"]) == 0
    assert capsys.readouterr().out.strip() == "sum(1..5-1): 10"


def test_triangular_of_a_thousand() -> None:
    from src.core import Natural
    from tools.bignum_demo import triangular

    assert triangular(Natural.from_u64(1001)) == 500500


def test_bench_command(capsys) -> None:
    from tools.bignum_demo import main

    assert main(["bench", "--n", "10", "--repeat", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("[bench] 10! x3: best=")
    assert "mean=" in out


def test_bench_rejects_non_positive_repeat() -> None:
    from tools.bignum_demo import main

    with pytest.raises(SystemExit):
        main(["bench", "--repeat", "0"])


def test_bad_decimal_argument_raises() -> None:
    from src.core import DecimalParseError
    from tools.bignum_demo import main

    with pytest.raises(DecimalParseError):
        main(["factorial", "ten"])
