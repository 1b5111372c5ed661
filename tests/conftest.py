from typing import List
import pytest
from namecorpus.examples import NameExample


MALE_NAMES = {
    "en_US": ["John", "James", "Robert", "Michael", "William", "David", "Richard"],
    "de_DE": ["Johann", "Jürgen", "Klaus", "Dieter", "Wolfgang", "Günther", "Uwe"],
    "ru_RU": ["Дмитрий", "Сергей", "Алексей", "Николай", "Владимир", "Иван"],
    "nl_NL": ["Jan", "Pieter", "Joost", "Maarten", "Sjoerd", "Bram"],
}

FEMALE_NAMES = {
    "en_US": ["Mary", "Jennifer", "Linda", "Elizabeth", "Susan"],
    "de_DE": ["Ursula", "Gisela", "Brigitte", "Jutta", "Hildegard"],
    "it_IT": ["Giulia", "Francesca", "Chiara", "Alessandra", "Federica"],
}


def _examples(names_by_language, gender) -> List[NameExample]:
    return [
        NameExample(text=name, language=language, gender=gender)
        for language, names in names_by_language.items()
        for name in names
    ]


@pytest.fixture
def male_examples() -> List[NameExample]:
    return _examples(MALE_NAMES, "male")


@pytest.fixture
def female_examples() -> List[NameExample]:
    return _examples(FEMALE_NAMES, "female")


@pytest.fixture
def corpus(male_examples, female_examples):
    return {"male": male_examples, "female": female_examples}
