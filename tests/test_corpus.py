import pytest
from namecorpus import CorpusConfig, available_languages, collect_names
from namecorpus.faker_names import locale_first_names


@pytest.fixture(scope="module")
def languages():
    return available_languages()


def test_default_policy_selects_locales(languages):
    assert languages
    assert languages == sorted(languages)
    assert not set(languages) & CorpusConfig().excluded_locales


def test_selected_locales_meet_threshold(languages):
    config = CorpusConfig()

    for locale in languages:
        names = locale_first_names(locale)

        assert len(names["male"]) >= config.min_names_per_gender
        assert len(names["female"]) >= config.min_names_per_gender


def test_collect_names_is_deterministic():
    first = collect_names("female")
    second = collect_names("female")

    assert first == second
    assert all(e.gender == "female" for e in first)


def test_collect_names_covers_selected_languages(languages):
    examples = collect_names("male")

    assert {e.language for e in examples} == set(languages)
    assert all(e.text for e in examples)


def test_excluding_a_locale(languages):
    dropped = languages[0]
    config = CorpusConfig(excluded_locales=CorpusConfig().excluded_locales | {dropped})

    assert dropped not in available_languages(config)
    assert all(e.language != dropped for e in collect_names("male", config))


def test_threshold_can_exclude_everything():
    config = CorpusConfig(min_names_per_gender=10**9)

    assert available_languages(config) == []
    assert collect_names("male", config) == []


def test_unknown_locale_has_no_names():
    assert locale_first_names("xx_XX") == {"male": (), "female": ()}


def test_config_rejects_non_positive_threshold():
    with pytest.raises(ValueError):
        CorpusConfig(min_names_per_gender=0)
