from gfx_converter.cards import normalize_card, normalize_cards


def test_normalize_cards_rewrites_ranks():
    assert normalize_cards("10h kc 2s") == "Th Kc 2s"


def test_numeric_rank_unchanged():
    assert normalize_cards("9d") == "9d"


def test_malformed_token_passes_through():
    assert normalize_cards("xx") == "xx"
    assert normalize_card("10") == "10"
    assert normalize_card("") == ""


def test_face_cards_any_case():
    assert normalize_cards("ah Ks qd jc") == "Ah Ks Qd Jc"


def test_suit_case_is_preserved():
    assert normalize_card("10S") == "TS"
    assert normalize_card("aH") == "AH"


def test_idempotent_on_target_notation():
    once = normalize_cards("10h kc qd ah 2s")
    assert normalize_cards(once) == once


def test_list_of_entries_is_joined():
    assert normalize_cards(["10s kh", "ad"]) == "Ts Kh Ad"
    assert normalize_cards([]) == ""
    assert normalize_cards(None) == ""
