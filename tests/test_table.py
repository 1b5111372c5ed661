import pandas as pd
import pytest
from namecorpus.examples import NameExample
from namecorpus.table import examples_from_frame, load_table, save_table


EXAMPLES = [
    NameExample(text="Jürgen", language="de_DE", gender="male"),
    NameExample(text="Ольга", language="ru_RU", gender="female"),
    NameExample(text="Nan", language="vi_VN", gender="male"),
]


@pytest.mark.parametrize("filename", ["names.csv", "names.tsv", "names.jsonl", "names.json"])
def test_save_then_load(tmp_path, filename):
    path = tmp_path / "out" / filename
    save_table(EXAMPLES, path)

    assert load_table(str(path)) == EXAMPLES


def test_invalid_rows_are_skipped(capsys):
    df = pd.DataFrame(
        {
            "name": ["Anna", "", "Bob", None],
            "language": ["sv_SE", "sv_SE", "en_US", "en_US"],
            "gender": ["female", "female", "unknown", "male"],
        }
    )

    examples = examples_from_frame(df)

    assert examples == [NameExample(text="Anna", language="sv_SE", gender="female")]
    assert "Skipped 3" in capsys.readouterr().out


def test_missing_columns():
    with pytest.raises(ValueError, match="missing columns"):
        examples_from_frame(pd.DataFrame({"name": ["Anna"]}))


def test_unsupported_extension(tmp_path):
    with pytest.raises(SystemExit):
        load_table(str(tmp_path / "names.xlsx"))

    with pytest.raises(SystemExit):
        save_table(EXAMPLES, tmp_path / "names.xlsx")
