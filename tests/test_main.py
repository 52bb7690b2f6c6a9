"""Test dello script dimostrativo."""

import csv

import main
from bloom_filter import BloomFilter


def test_make_items():
    assert main.make_items(3, 6) == ["item_3", "item_4", "item_5"]


def test_measure_false_positive_rate():
    bf = BloomFilter(100, 3)
    assert main.measure_false_positive_rate(bf, ["a", "b"]) == (0, 0.0)
    assert main.measure_false_positive_rate(bf, []) == (0, 0.0)
    bf.add("a")
    assert main.measure_false_positive_rate(bf, ["a", "a"]) == (2, 1.0)


def test_run_scenarios(capsys):
    main.run_scenarios()
    out = capsys.readouterr().out
    assert "Contains 'apple': True" in out
    assert "Contains '49': True" in out
    assert "False Positives found: 38" in out
    assert "Theoretical False Positive Rate: 0.82%" in out


def test_run_fpr_benchmark(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "FPR_CONFIGS", [(1_000, 3, 100)])
    monkeypatch.setattr(main, "NUM_QUERIES", 50)
    out = tmp_path / "results.csv"

    rows = main.run_fpr_benchmark(str(out))

    assert [r["hash"] for r in rows] == ["rolling", "murmur3"]
    with open(out, newline="") as f:
        saved = list(csv.DictReader(f))
    assert len(saved) == 2
    for row in saved:
        assert int(row["num_queries"]) == 50
        assert 0.0 <= float(row["observed_fpr"]) <= 1.0
        assert float(row["fill_ratio"]) > 0.0
