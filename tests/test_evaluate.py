import json
import sys
import pytest
from namecorpus.table import save_table
from namevibe.evaluate import TOP_K, evaluate_split, main, split_examples


def test_split_is_deterministic_and_disjoint(male_examples):
    train_a, eval_a = split_examples(male_examples, 0.25, seed=7)
    train_b, eval_b = split_examples(male_examples, 0.25, seed=7)

    assert train_a == train_b
    assert eval_a == eval_b
    assert len(eval_a) == round(len(male_examples) * 0.25)
    assert len(train_a) + len(eval_a) == len(male_examples)
    assert not {id(e) for e in train_a} & {id(e) for e in eval_a}


def test_split_keeps_at_least_one_eval_example(male_examples):
    _, eval_examples = split_examples(male_examples[:3], 0.01, seed=0)

    assert len(eval_examples) == 1


def test_evaluate_on_training_data(male_examples):
    metrics = evaluate_split(male_examples, male_examples, "male", ngram_size=3, alpha=1.0)

    assert 0.0 <= metrics["accuracy"] <= 1.0
    assert metrics["accuracy"] > 0.5
    assert 0.0 <= metrics["macro_f1"] <= 1.0
    assert metrics[f"top{TOP_K}_accuracy"] >= metrics["accuracy"]
    assert set(metrics["per_language"]) == {"en_US", "de_DE", "ru_RU", "nl_NL"}
    assert sum(m["support"] for m in metrics["per_language"].values()) == len(male_examples)


def test_evaluate_held_out(male_examples):
    train_examples, eval_examples = split_examples(male_examples, 0.3, seed=1)
    metrics = evaluate_split(train_examples, eval_examples, "male", ngram_size=3, alpha=1.0)

    assert metrics[f"top{TOP_K}_accuracy"] >= metrics["accuracy"]
    assert 0.0 <= metrics["accuracy"] <= 1.0


@pytest.fixture
def corpus_file(tmp_path, corpus):
    path = tmp_path / "names.jsonl"
    save_table(corpus["male"] + corpus["female"], path)

    return path


def test_main_writes_report(tmp_path, corpus_file, monkeypatch, capsys):
    output = tmp_path / "reports" / "female.json"

    monkeypatch.delenv("NAME_VIBE_NGRAM_SIZE", raising=False)
    monkeypatch.delenv("NAME_VIBE_ALPHA", raising=False)
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "evaluate",
            "--gender", "female",
            "--corpus-path", str(corpus_file),
            "--test-size", "0.2",
            "--seed", "3",
            "--output", str(output),
        ],
    )

    main()

    report = json.loads(output.read_text(encoding="utf-8"))

    assert set(report) == {"model", "split", "metrics"}
    assert report["model"] == {"gender": "female", "ngram_size": 3, "alpha": 1.0}
    assert report["split"]["num_rows"] == 15
    assert report["split"]["num_eval"] == 3
    assert f"top{TOP_K}_accuracy" in report["metrics"]
    assert "Wrote metrics to" in capsys.readouterr().out


@pytest.mark.parametrize(
    "extra_args, message",
    [
        (["--test-size", "1.5"], "test-size"),
        (["--corpus-path", "missing.jsonl"], "Corpus file not found"),
    ],
)
def test_main_rejects_bad_arguments(tmp_path, monkeypatch, extra_args, message):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["evaluate", *extra_args])

    with pytest.raises(SystemExit, match=message):
        main()
