from core.tokenizer import detect_delimiter, split_line


def test_detect_delimiter_prefers_semicolon():
    assert detect_delimiter("a;b;c,d") == ";"
    assert detect_delimiter("a,b,c;d") == ","


def test_detect_delimiter_tie_is_semicolon():
    assert detect_delimiter("a;b,c") == ";"
    assert detect_delimiter("") == ";"


def test_detect_delimiter_only_looks_at_sample():
    text = ";" * 10 + "x" * 2000 + "," * 50
    assert detect_delimiter(text) == ";"


def test_split_line_keeps_quoted_delimiters():
    assert split_line('"Smith, John";25;1:05,32', ";") == ["Smith, John", "25", "1:05,32"]
    assert split_line('"Smith; John",25', ",") == ["Smith; John", "25"]


def test_split_line_trims_fields():
    assert split_line("  Anna ;  100m Frisim;", ";") == ["Anna", "100m Frisim", ""]


def test_split_line_unmatched_quote_swallows_rest():
    assert split_line('a;"b;c;d', ";") == ["a", "b;c;d"]
