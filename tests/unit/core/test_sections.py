"""Unit tests for core/sections.py"""

from txtventure.core.sections import extract_header, parse_section, rewrite_links


def _url(section_id):
    return f"http://x/{section_id}.txt"


def _filename(section_id):
    return f"out/{section_id}.txt" if section_id else ""


# --- extract_header ---

def test_extract_header_level_two():
    section_id, body = extract_header("## The Dark Cave\nIt is dark.\n")
    assert section_id == "the-dark-cave"
    assert body == "\nIt is dark.\n"


def test_extract_header_deeper_levels():
    assert extract_header("#### Deep Room\n")[0] == "deep-room"


def test_extract_header_ignores_level_one():
    """A single # is not an identifier source."""
    section_id, body = extract_header("# Title\ntext\n")
    assert section_id == ""
    assert body == "# Title\ntext\n"


def test_extract_header_no_space_after_hashes():
    assert extract_header("##Attic\n")[0] == "attic"


def test_extract_header_first_match_only():
    """Later header-like lines stay in the body as plain text."""
    section_id, body = extract_header("## First\n## Second\n")
    assert section_id == "first"
    assert "## Second" in body


def test_extract_header_not_at_line_start():
    assert extract_header("text ## Not a header\n")[0] == ""


# --- rewrite_links ---

def test_rewrite_links_multiple():
    text = "Go <#North Room> or <#south room>."
    assert rewrite_links(text, _url) == "Go http://x/north-room.txt or http://x/south-room.txt."


def test_rewrite_links_leaves_other_text_alone():
    text = "a < b and c > d, <not a link>, # hash"
    assert rewrite_links(text, _url) == text


def test_rewrite_links_label_with_hash():
    """Punctuation inside a label, '#' included, is normalized away."""
    assert rewrite_links("<#Room #2>", _url) == "http://x/room-2.txt"


def test_rewrite_links_unknown_target_still_resolves():
    assert rewrite_links("<#Nowhere>", _url) == "http://x/nowhere.txt"


# --- parse_section ---

def test_parse_section_full():
    section = parse_section("\n## Start\nGo to <#End>.\n\n", _url, _filename)
    assert section.id == "start"
    assert section.destination_path == "out/start.txt"
    assert section.body == "Go to http://x/end.txt.\n"


def test_parse_section_no_header():
    section = parse_section("Intro text.\n", _url, _filename)
    assert section.id == ""
    assert section.destination_path == ""
    assert section.body == "Intro text.\n"


def test_parse_section_empty_id_never_asks_filename_resolver():
    """A headerless block gets no destination even from a resolver that always answers."""
    section = parse_section("no header", _url, lambda section_id: "always.txt")
    assert section.destination_path == ""


def test_parse_section_single_trailing_newline():
    section = parse_section("## Room\n\n\nBody\n\n\n\n", _url, _filename)
    assert section.body == "Body\n"


def test_parse_section_empty_block():
    section = parse_section("", _url, _filename)
    assert section.body == "\n"


def test_parse_section_idempotent():
    block = "## Hall\nSee <#The Dark Cave>.\n"
    assert parse_section(block, _url, _filename) == parse_section(block, _url, _filename)


def test_parse_section_prepends_art():
    art = "  /\\\n /  \\"
    section = parse_section("## Peak\nCold up here.\n", _url, _filename, art=lambda i: art)
    assert section.body == f"{art}\n\nCold up here.\n"


def test_parse_section_art_receives_id():
    seen = []
    parse_section("## Peak\n", _url, _filename, art=lambda i: seen.append(i))
    assert seen == ["peak"]


def test_parse_section_art_not_found():
    section = parse_section("## Peak\nCold.\n", _url, _filename, art=lambda i: None)
    assert section.body == "Cold.\n"
