"""Tests for the command-line driver."""

from nttint.main import benchmark, main


def test_multiply(capsys):
    assert main(["multiply", "375", "859"]) == 0
    assert capsys.readouterr().out.strip() == "322125"


def test_multiply_with_separators(capsys):
    assert main(["multiply", "1,000,000", "2_000"]) == 0
    assert capsys.readouterr().out.strip() == "2000000000"


def test_multiply_verbose(capsys):
    assert main(["multiply", "12", "34", "-v"]) == 0
    out = capsys.readouterr().out
    assert "lhs buckets" in out
    assert out.strip().endswith("408")


def test_params(capsys):
    assert main(["params", "16"]) == 0
    out = capsys.readouterr().out
    assert "modulus" in out
    assert "omega" in out


def test_roundtrip(capsys):
    assert main(["roundtrip", "32", "--num-tests", "4"]) == 0
    out = capsys.readouterr().out
    assert out.count("✓ PASS") == 4
    assert "✗ FAIL" not in out


def test_roundtrip_direct(capsys):
    assert main(["roundtrip", "8", "--method", "direct"]) == 0
    assert "✓ PASS" in capsys.readouterr().out


def test_table(capsys):
    assert main(["table", "4", "--max-value", "1"]) == 0
    out = capsys.readouterr().out
    assert "table for n = 4" in out


def test_rejects_non_power_of_two(capsys):
    assert main(["roundtrip", "12"]) == 1
    assert "power of two" in capsys.readouterr().out


def test_reports_transform_error(capsys):
    assert main(["params", "1024", "--max-value", "99999"]) == 1
    assert "Error" in capsys.readouterr().out


def test_benchmark(capsys):
    results = benchmark(fib_n=50, fac_n=20, num_runs=1, verbose=False)
    assert results is not None
    assert all(entry["passed"] for entry in results.values())
    assert main(["benchmark", "--fib", "30", "--fac", "10", "--num-runs", "1"]) == 0


def test_benchmark_results_beyond_int_str_limit(capsys):
    # 2000! has 5736 digits, more than int/str conversion allows by default
    assert main(["benchmark", "--fib", "30", "--fac", "2000", "--num-runs", "1"]) == 0
    assert "FAIL" not in capsys.readouterr().out
