from core.columns import ColumnMap, normalize_header_name, pick_column, resolve_columns


def test_normalize_header_name_folds_case_space_and_nordic_letters():
    assert normalize_header_name("Ålder   vid\tloppet") == "alder vid loppet"
    assert normalize_header_name("Födelseår") == "fodelsear"


def test_pick_column_prefers_exact_match_over_substring():
    headers = ["Ålder idag", "Ålder"]
    assert pick_column(headers, ["Alder"]) == "Ålder"


def test_pick_column_falls_back_to_substring():
    headers = ["Simidrottare (licens)", "Gren", "Tid"]
    assert pick_column(headers, ["Simidrottare", "Namn"]) == "Simidrottare (licens)"


def test_pick_column_candidate_priority():
    headers = ["Resultat", "Tid"]
    assert pick_column(headers, ["Tid", "Resultat", "Sluttid"]) == "Tid"


def test_pick_column_returns_none():
    assert pick_column(["Klubb"], ["Gren", "Simgren"]) is None


def test_resolve_columns_optional_fields():
    columns = resolve_columns(["Simmare", "Simgren", "Sluttid", "Kön", "Född", "Tävlingsdatum"])
    assert columns.name == "Simmare"
    assert columns.event == "Simgren"
    assert columns.time == "Sluttid"
    assert columns.gender == "Kön"
    assert columns.birth_year == "Född"
    assert columns.date == "Tävlingsdatum"
    assert columns.age is None
    assert columns.missing_required() == []


def test_missing_required_lists_display_names_in_order():
    assert resolve_columns(["Namn", "Gren"]).missing_required() == ["Tid"]
    assert ColumnMap().missing_required() == ["Namn/Simidrottare", "Gren", "Tid"]


def test_pick_column_last_duplicate_header_wins():
    assert pick_column(["Ålder", "Alder"], ["Ålder"]) == "Alder"
    assert pick_column(["Ålder idag", "Alder idag"], ["Alder"]) == "Alder idag"
