"""Generate a sample Tempus "Statistikrapport Individuell" export.

Usage:
    python data/create_sample_export.py
"""

from __future__ import annotations

from pathlib import Path

OUTPUT = Path(__file__).resolve().parent / "statistikrapport-individuell.csv"

PREAMBLE = [
    "Statistikrapport Individuell",
    "Klubb: Simklubben Test;Period: 2024-01-01 - 2024-12-31",
    "",
]

HEADER = ["Simidrottare", "Född", "Kön", "Gren", "Tid", "Datum", "Tävling"]

ROWS = [
    ["Anna Svensson", "2008", "Dam", "100m Frisim", "1:05,30", "2024-03-02", "Vårsimiaden"],
    ["Anna Svensson", "2008", "Dam", "100 m Ryggsim", "1:12,84", "2024-03-02", "Vårsimiaden"],
    ["Anna Svensson", "2008", "Dam", "50m Frisim", "29,71", "2024-05-11", "Sommarsprinten"],
    ["Östen Åberg", "2007", "Herr", "100m Bröstsim", "1:14,02", "2024-03-03", "Vårsimiaden"],
    ["Östen Åberg", "2007", "Herr", "100m Fjärilsim", "1:03,55", "2024-05-11", "Sommarsprinten"],
    ["Erik Lind", "2009", "Herr", "200m Frisim", "2:10,45", "2024-05-12", "Sommarsprinten"],
    ["Erik Lind", "2009", "Herr", "100m Frisim", "58,90", "2024-05-12", "Sommarsprinten"],
    ["Maja Ek, jr", "2010", "Dam", "100m Fjärilsim", "1:15,20", "2024-05-12", "Sommarsprinten"],
]

FOOTER = [
    "",
    "Placering;Simidrottare;Gren;Tid",
]


def _line(values: list[str]) -> str:
    return ";".join(f'"{v}"' if "," in v or ";" in v else v for v in values)


def generate(path: Path = OUTPUT) -> Path:
    lines = PREAMBLE + [_line(HEADER)] + [_line(r) for r in ROWS] + FOOTER
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return path


if __name__ == "__main__":
    out = generate()
    print(f"Created sample file: {out}")
