import pytest

from core.aggregation import SwimmerRecord, TimeSample
from core.selection import available_ages, filter_swimmers, required_event_keys, swedish_sort_key


def record(name, gender="", age=None, **best):
    return SwimmerRecord(
        name=name,
        gender=gender,
        age=age,
        best_by_canonical_key={k: TimeSample.from_seconds(v) for k, v in best.items()},
    )


SWIMMERS = {
    r.name: r
    for r in [
        record("Östen", "Herr", 16, frisim_100=58.2, rygg_100=66.0),
        record("Anna", "K", 15, frisim_100=64.9),
        record("Zelda", "Dam", 16),
        record("Åsa", "Dam", None),
        record("Bo", "", 15),
    ]
}


@pytest.mark.parametrize(
    "relay, keys",
    [
        ("4x50 frisim", ["frisim_50"]),
        ("4x100 frisim", ["frisim_100"]),
        ("4x200 Frisim", ["frisim_200"]),
        ("4x100 medley", ["rygg_100", "brost_100", "fjaril_100", "frisim_100"]),
        ("4x50 medley", ["rygg_100", "brost_100", "fjaril_100", "frisim_100"]),
        ("", []),
        ("4x400 frisim", []),
    ],
)
def test_required_event_keys(relay, keys):
    assert required_event_keys(relay) == keys


def test_swedish_letters_sort_after_z():
    names = ["Östen", "Ärla", "Åsa", "Zelda", "anna"]
    assert sorted(names, key=swedish_sort_key) == ["anna", "Zelda", "Åsa", "Ärla", "Östen"]


def test_foreign_accents_sort_with_their_base_letter():
    names = ["Nyberg", "Núñez", "Zetterberg", "Çelik", "Åberg", "Šimić"]
    assert sorted(names, key=swedish_sort_key) == ["Çelik", "Núñez", "Nyberg", "Šimić", "Zetterberg", "Åberg"]


def test_decomposed_swedish_letters_sort_after_z():
    decomposed_aberg = "A\u030aberg"
    assert sorted([decomposed_aberg, "Zetterberg"], key=swedish_sort_key) == ["Zetterberg", decomposed_aberg]


def test_filter_without_filters_returns_everyone_sorted():
    entries = filter_swimmers(SWIMMERS)
    assert [e.name for e in entries] == ["Anna", "Bo", "Zelda", "Åsa", "Östen"]


def test_filter_by_class():
    assert [e.name for e in filter_swimmers(SWIMMERS, "Dam")] == ["Anna", "Zelda", "Åsa"]
    assert [e.name for e in filter_swimmers(SWIMMERS, "Herr")] == ["Östen"]
    assert len(filter_swimmers(SWIMMERS, "Mix")) == len(SWIMMERS)


def test_filter_by_age_skips_unknown_ages():
    entries = filter_swimmers(SWIMMERS, "Dam", ages={16})
    assert [e.name for e in entries] == ["Zelda"]
    assert [e.name for e in filter_swimmers(SWIMMERS, "", ages=[15])] == ["Anna", "Bo"]


def test_entries_carry_required_times():
    entries = {e.name: e for e in filter_swimmers(SWIMMERS, relay_type="4x100 medley")}
    osten = entries["Östen"]
    assert osten.gender == "Herr"
    assert osten.times == {
        "rygg_100": "1:06.00",
        "brost_100": "",
        "fjaril_100": "",
        "frisim_100": "0:58.20",
    }
    assert entries["Anna"].gender == "Dam"


def test_available_ages():
    assert available_ages(SWIMMERS) == [15, 16]
